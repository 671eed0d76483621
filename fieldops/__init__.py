# fieldops: REST backend for fiber field-service orders and their costing
