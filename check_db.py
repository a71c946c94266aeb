print("Starting check_db.py...")
from salondb import create_app
from salondb.config import Config
from salondb.extensions import db
from sqlalchemy import text

print("Imports done.")

class CheckConfig(Config):
    SEED_ON_STARTUP = False

try:
    app = create_app(CheckConfig)
    print("App created.")

    with app.app_context():
        print("Inside app context.")
        try:
            # Check connection
            result = db.session.execute(text('SELECT 1'))
            print(f"Connection successful: {result.scalar()}")

            foreign_keys = db.session.execute(text('PRAGMA foreign_keys')).scalar()
            print(f"Foreign key enforcement: {'on' if foreign_keys else 'off'}")

            # Check if tables exist
            inspector = db.inspect(db.engine)
            tables = inspector.get_table_names()
            print(f"Tables found: {tables}")

            for table in tables:
                count = db.session.execute(text(f'SELECT COUNT(*) FROM "{table}"')).scalar()
                print(f"  {table}: {count} rows")

        except Exception as e:
            print(f"Database check failed: {e}")
except Exception as e:
    print(f"App creation failed: {e}")
