from contextlib import contextmanager
from unittest import TestCase

from sqlalchemy import event

from dashboard import cache, db, create_app

app = create_app("../tests/config-test.json")
app.app_context().push()

class BaseTestCase(TestCase):
    def setUp(self):
        self.app = app
        self.client = self.app.test_client()
        self._ctx = self.app.test_request_context()
        self._ctx.push()
        self.maxDiff = None
        db.create_all()
        cache.clear()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self._ctx.pop()

    def try_add_entity(self, entity):
        try:
            db.session.add(entity)
            db.session.commit()
        except Exception as e:
            print(f'Exception while trying to add <{entity}>:', e)
            db.session.rollback()

    def try_add_entities(self, entities):
        for entity in entities:
            self.try_add_entity(entity)

    @contextmanager
    def capture_statements(self):
        '''
        Collects (statement, parameters) of all SQL statements sent to the DB
        '''
        statements = []
        def _before_cursor_execute(_conn, _cursor, statement, parameters, _context, _executemany):
            statements.append((statement, parameters))

        event.listen(db.engine, 'before_cursor_execute', _before_cursor_execute)
        try:
            yield statements
        finally:
            event.remove(db.engine, 'before_cursor_execute', _before_cursor_execute)

    @staticmethod
    def get_writes(statements, verb):
        return [s for s in statements if s[0].lstrip().upper().startswith(verb)]
