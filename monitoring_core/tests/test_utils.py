"""
Test Monitoring Utilities
"""
from django.test import SimpleTestCase

from ..utils import slugify_cache_key


class SlugifyCacheKeyTest(SimpleTestCase):

    def test_slugify(self):
        cases = {
            'Foo Bar': 'foo-bar',
            'Foo---Bar': 'foo-bar',
            '': '',
            '  --Foo Bar!!  ': 'foo-bar',
            'monitoring_core.providers.DiskSpaceProvider': 'monitoring-core-providers-diskspaceprovider',
            'Ünïcödé Straße': 'unicode-strae',
            '---': '',
        }

        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(slugify_cache_key(value), expected)

    def test_slugify_is_idempotent(self):
        for value in ('foo-bar', 'a1-b2-c3', 'Some Mixed__Value'):
            with self.subTest(value=value):
                once = slugify_cache_key(value)
                self.assertEqual(slugify_cache_key(once), once)
