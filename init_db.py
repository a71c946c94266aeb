from salondb import create_app
from salondb.config import Config
from salondb.extensions import db
from salondb.schema import ensure_schema
from salondb.seed import seed_if_empty
from salondb.store import get_store

class ResetConfig(Config):
    SEED_ON_STARTUP = False

app = create_app(ResetConfig)

with app.app_context():
    print("Dropping all tables...")
    db.drop_all()
    print("Creating all tables...")
    ensure_schema()

    print("Seeding initial data...")
    seed_if_empty(get_store(app))

    # Verify schema
    inspector = db.inspect(db.engine)
    columns = [column['name'] for column in inspector.get_columns('appointments')]
    print(f"Appointment table columns: {columns}")

    foreign_keys = inspector.get_foreign_keys('appointments')
    if {fk['referred_table'] for fk in foreign_keys} == {'customers', 'employees'}:
        print("SUCCESS: appointment foreign keys exist.")
    else:
        print("FAILURE: appointment foreign keys MISSING.")

    print("Database initialized successfully.")
