"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from bloodbank_gateway.api.main import create_app
from bloodbank_gateway.api.dependencies import get_today
from bloodbank_gateway.domain.models import DonorCandidate


@pytest.fixture
def today() -> date:
    """Fixed reference date so eligibility tests never depend on the clock"""
    return date(2024, 6, 1)


@pytest.fixture
def client(today: date) -> TestClient:
    """Create FastAPI test client with a pinned clock"""
    app = create_app()
    app.dependency_overrides[get_today] = lambda: today
    return TestClient(app)


@pytest.fixture
def sample_candidates() -> list[DonorCandidate]:
    """Mixed donor pool across Dhaka and Chittagong"""
    return [
        DonorCandidate("A+", "Dhaka", "Mirpur", False, 1, True, donor_id="d1"),
        DonorCandidate("B+", "Dhaka", "Mirpur", True, 12, True, donor_id="d2"),
        DonorCandidate("O-", "Chittagong", "Patiya", True, 30, True, donor_id="d3"),
        DonorCandidate("O+", "Dhaka", "Savar", True, 4, True, donor_id="d4"),
        DonorCandidate("A-", "Dhaka", "Mirpur", True, 8, False, donor_id="d5"),
        DonorCandidate("AB+", "Dhaka", "Mirpur", True, 40, True, donor_id="d6"),
        DonorCandidate("A+", "dhaka", "MIRPUR", True, 2, True, donor_id="d7"),
    ]
