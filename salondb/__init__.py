from flask import Flask
from salondb.config import Config
import logging

def create_app(config_class=Config, seed_provider=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    logging.getLogger('salondb').setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    from salondb.extensions import db
    db.init_app(app)

    from salondb.store import init_store
    store = init_store(app, provider=seed_provider)

    # Callers only see the app once the initial data is in place
    if app.config.get('WAIT_FOR_SEED', True):
        store.wait_ready()

    return app
