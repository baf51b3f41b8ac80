from dashboard import cache
from dashboard.cache_tools import revalidate_path, view_cache_key
from tests import BaseTestCase

class TestCacheTools(BaseTestCase):
    def test_view_cache_key(self):
        with self.app.test_request_context('/dashboard/invoices/'):
            self.assertEqual(view_cache_key(), 'view//dashboard/invoices')

    def test_revalidate_path(self):
        cache.set('view//dashboard/invoices', 'page')
        cache.set('view//dashboard/customers', 'page')
        revalidate_path('/dashboard/invoices/')
        self.assertIsNone(cache.get('view//dashboard/invoices'))
        self.assertEqual(cache.get('view//dashboard/customers'), 'page')
