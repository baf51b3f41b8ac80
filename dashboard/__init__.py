''' Initialization of the application '''
from json import load
import logging
import os
import sqlite3
import types

from flask import Flask
from flask_caching import Cache
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine

app: Flask
cache = Cache()
db = SQLAlchemy()
migrate = Migrate()

def create_app(config=None):
    ''' Application factory '''
    global app
    config_file = config or os.environ.get('DASHBOARD_CONFIG_FILE') or 'config-default.json'
    app = Flask(__name__)
    app.config.from_file(config_file, load=load)
    if os.environ.get('DATABASE_URL'):
        app.config['SQLALCHEMY_DATABASE_URI'] = os.environ['DATABASE_URL']
    init_logging(app)

    cache.init_app(app)
    init_db(app, db)
    migrate.init_app(app, db, compare_type=True)

    register_components(app)

    logging.info("The application is started")
    return app

def register_components(flask_app):
    import_models(flask_app)
    import dashboard.customers
    import dashboard.invoices

    components_modules = [m[1] for m in globals().items()
                          if isinstance(m[1], types.ModuleType)
                             and m[1].__name__.startswith('dashboard.')
                             and m[1].__file__
                             and m[1].__file__.endswith('__init__.py')
                         ]
    for component_module in components_modules:
        component_module.register_blueprints(flask_app)
    flask_app.logger.info('Blueprints are registered')

def import_models(flask_app):
    import dashboard.customers.models #pyright: ignore
    import dashboard.invoices.models
    with flask_app.app_context():
        db.create_all()

def init_db(app: Flask, db: SQLAlchemy):
    logger = logging.getLogger('init_db()')
    db.init_app(app)

    def _dispose_db_pool():
        with app.app_context():
            logging.getLogger('_dispose_db_pool()').info("Disposing DB engine")
            db.engine.dispose() #type: ignore

    try:
        logger.info("Trying to postfork the DB connection")
        from uwsgidecorators import postfork #type: ignore
        postfork(_dispose_db_pool)
    except ImportError:
        logger.info("No UWSGI environment is detected")

@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    '''SQLite doesn't enforce foreign keys unless asked to on every connection'''
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()

def init_logging(flask_app):
    logger = logging.getLogger()
    logger.setLevel(flask_app.config['LOG_LEVEL'])
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s\t%(levelname)s\t%(name)s:%(funcName)s(%(filename)s:%(lineno)d): %(message)s"))
    logger.addHandler(handler)
    logger.info("Starting %s", flask_app.name)
    logger.info("Log level is %s", logging.getLevelName(logger.level))
    flask_app.logger.setLevel(flask_app.config['LOG_LEVEL'])
