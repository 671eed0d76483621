# Services package: request-level orchestration around the repositories
