import pytest
import numpy as np
from fastapi.testclient import TestClient

from benford_analyzer.main import app


@pytest.fixture(scope="function")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def benford_values():
    # Evenly spaced log-mantissas over five whole decades follow Benford's Law to within a count per bin
    n = 5000
    return (10 ** ((np.arange(n) + 0.5) / n * 5)).tolist()


@pytest.fixture
def uniform_digit_values():
    values = []
    for d in range(1, 10):
        values.extend([d * 10**k + k for k in range(0, 50)])
    return values


@pytest.fixture
def sample_csv():
    return """id,vendor,amount
1,"Acme, Inc.","$1,200.50"
2,Globex,345.00
3,Initech,n/a
4,Umbrella,"$9,870"
5,Hooli,0"""
