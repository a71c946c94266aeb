from sqlalchemy import text

from salondb.extensions import db
from salondb.schema import ensure_schema

def test_all_tables_created(app):
    tables = set(db.inspect(db.engine).get_table_names())
    assert tables == {'customers', 'employees', 'services', 'appointments', 'tally_items', 'products'}

def test_appointment_foreign_keys(app):
    foreign_keys = db.inspect(db.engine).get_foreign_keys('appointments')
    referred = {(fk['constrained_columns'][0], fk['referred_table']) for fk in foreign_keys}
    assert referred == {('customer_id', 'customers'), ('employee_id', 'employees')}

def test_foreign_key_enforcement_enabled(app):
    assert db.session.execute(text('PRAGMA foreign_keys')).scalar() == 1

def test_column_defaults_declared(app):
    columns = {c['name']: c for c in db.inspect(db.engine).get_columns('employees')}
    assert "09:00" in columns['working_hours_start']['default']
    assert "18:00" in columns['working_hours_end']['default']
    assert columns['rating']['default'] == '5.0'
    assert 'CURRENT_TIMESTAMP' in columns['updated_at']['default']

def test_ensure_schema_keeps_existing_rows(store, customer):
    ensure_schema()
    ensure_schema()
    assert store.customers.get_by_id(customer['id']) == customer

def test_raw_insert_uses_declared_defaults(store):
    db.session.execute(text(
        "INSERT INTO products (id, name, price, category) VALUES ('p-raw', 'Comb', 99, 'Tools')"
    ))
    db.session.commit()
    product = store.products.get_by_id('p-raw')
    assert product['stock'] == 0
    assert product['createdAt']
