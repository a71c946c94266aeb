import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

def test_service_round_trip(store, service):
    assert service['id'] == 'svc-1'
    assert store.services.get_by_id('svc-1') == service
    assert store.services.get_all() == [service]

def test_service_update_and_delete(store, service):
    store.services.update('svc-1', {'price': 650.0})
    updated = store.services.get_by_id('svc-1')
    assert updated['price'] == 650.0
    assert updated['duration'] == service['duration']
    assert updated['description'] == service['description']

    store.services.delete('svc-1')
    assert store.services.get_by_id('svc-1') is None

def test_service_requires_price(store):
    with pytest.raises(IntegrityError):
        store.services.create({'id': 'svc-9', 'name': 'Wax', 'duration': 20, 'category': 'Skin'})

def test_service_update_rejects_wrong_type(store, service):
    with pytest.raises(ValidationError):
        store.services.update('svc-1', {'price': 'expensive'})
    assert store.services.get_by_id('svc-1')['price'] == service['price']

def test_services_ordered_by_name(store):
    store.services.create({'id': 'svc-a', 'name': 'Pedicure', 'duration': 50, 'price': 800, 'category': 'Nails'})
    store.services.create({'id': 'svc-b', 'name': 'Facial', 'duration': 60, 'price': 1200, 'category': 'Skin'})
    assert [s['name'] for s in store.services.get_all()] == ['Facial', 'Pedicure']

def test_product_defaults_stock_to_zero(store):
    created = store.products.create({'id': 'prod-1', 'name': 'Shampoo', 'price': 650.0, 'category': 'Hair Care'})
    assert created['stock'] == 0
    assert created['brand'] is None
    assert store.products.get_by_id('prod-1') == created

def test_product_partial_update(store):
    store.products.create({
        'id': 'prod-1', 'name': 'Shampoo', 'price': 650.0, 'category': 'Hair Care',
        'stock': 10, 'brand': 'SilkPro',
    })
    store.products.update('prod-1', {'stock': 7})
    product = store.products.get_by_id('prod-1')
    assert product['stock'] == 7
    assert product['brand'] == 'SilkPro'
    assert product['price'] == 650.0

def test_products_ordered_by_name_and_deleted(store):
    store.products.create({'id': 'p2', 'name': 'Serum', 'price': 899, 'category': 'Skin Care'})
    store.products.create({'id': 'p1', 'name': 'Beard Oil', 'price': 399, 'category': 'Grooming'})
    assert [p['id'] for p in store.products.get_all()] == ['p1', 'p2']

    store.products.delete('p1')
    store.products.delete('missing')
    assert [p['id'] for p in store.products.get_all()] == ['p2']
