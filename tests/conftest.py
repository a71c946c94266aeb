import pytest

from salondb import create_app
from salondb.config import Config
from salondb.extensions import db
from salondb.store import get_store

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_ON_STARTUP = False

@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()

@pytest.fixture
def store(app):
    return get_store(app)

@pytest.fixture
def customer(store):
    return store.customers.create({
        'name': 'Asha',
        'phone': '9990001111',
        'gender': 'female',
        'preferredServices': ['svc-1'],
    })

@pytest.fixture
def employee(store):
    return store.employees.create({
        'name': 'Meera',
        'role': 'Stylist',
        'specialties': ['Hair Colour'],
    })

@pytest.fixture
def service(store):
    return store.services.create({
        'id': 'svc-1',
        'name': 'Haircut',
        'duration': 45,
        'price': 500.0,
        'category': 'Hair',
        'description': 'Cut and blow-dry',
    })
