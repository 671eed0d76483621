import os

# vóór het importeren van fieldops: settings worden bij import gelezen
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-secret")
os.environ.setdefault("METRICS_ENABLED", "true")

import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fieldops import models  # noqa: F401  (registreert tabellen)
from fieldops.auth.jwt import create_access_token
from fieldops.db import Base, get_db
from fieldops.main import app
from fieldops.models import Client, DropCable, InventoryItem, ServiceCost, Staff

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db():
    Base.metadata.create_all(bind=test_engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db):
    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_headers():
    def _make(role="admin", user_id=None):
        token = create_access_token(
            user_id=user_id or str(uuid.uuid4()),
            email=f"{role}@example.com",
            role=role,
        )
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def admin_headers(make_headers):
    return make_headers("admin")


@pytest.fixture
def openserve_client(db):
    client = Client(
        first_name="Thandi",
        last_name="Mokoena",
        email="ops@openserve.example",
        company_name="Openserve Western Cape",
    )
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


@pytest.fixture
def drop_cable_sheet(db, openserve_client):
    sheet = ServiceCost(
        client_id=openserve_client.id,
        order_type="drop_cable",
        survey_planning_cost=250.0,
        callout_cost=400.0,
        installation_cost=1500.0,
        per_meter_rate=20.0,
        discount=0.85,
        spon_budi_opti_cost=120.0,
        splitter_install_cost=80.0,
        mousepad_install_cost=60.0,
        updated_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )
    db.add(sheet)
    db.commit()
    db.refresh(sheet)
    return sheet


@pytest.fixture
def technician(db):
    staff = Staff(
        auth_user_id=str(uuid.uuid4()),
        first_name="Sipho",
        surname="Dlamini",
        email="sipho@example.com",
        role="technician",
    )
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


@pytest.fixture
def stock(db):
    cable = InventoryItem(item_name="Drop cable 1F", item_code="DC-1F", unit="m", quantity=500, category="cable")
    connectors = InventoryItem(item_name="SC/APC connector", unit="pcs", quantity=3)
    db.add_all([cable, connectors])
    db.commit()
    return cable, connectors


@pytest.fixture
def assigned_job(db, openserve_client, technician):
    job = DropCable(
        client_id=openserve_client.id,
        circuit_number="CIR-INV1",
        site_b_name="Mitchells Plain",
        technician_id=technician.id,
        week="2025-07",
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job
