"""
Test Monitoring Result
"""
import json

from django.test import SimpleTestCase

from ..result import MonitoringResult, ResultJSONEncoder


class MonitoringResultTest(SimpleTestCase):
    """Test result health rollup and serialization."""

    def test_health_rollup(self):
        """Own flag and sub-results combine into the reported health."""
        cases = [
            (True, [True, True], True),
            (True, [True, False], False),
            (False, [True, True], False),
            (False, [], False),
            (True, [], True),
        ]

        for own, subs, expected in cases:
            with self.subTest(own=own, subs=subs):
                result = MonitoringResult('parent', own)
                for index, healthy in enumerate(subs):
                    result.add_sub_result(MonitoringResult(f'sub{index}', healthy))

                self.assertIs(result.is_healthy(), expected)

    def test_unhealthy_grandchild_propagates_through_child(self):
        child = MonitoringResult('child', True).add_sub_result(MonitoringResult('grandchild', False))
        parent = MonitoringResult('parent', True).add_sub_result(child)

        self.assertFalse(parent.is_healthy())

    def test_fluent_setters(self):
        result = MonitoringResult('service', True)

        returned = result.set_healthy(False).set_reason('broken').add_sub_result(
            MonitoringResult('sub', True)
        )

        self.assertIs(returned, result)
        self.assertFalse(result.healthy)
        self.assertEqual(result.reason, 'broken')
        self.assertEqual(len(result.sub_results), 1)

    def test_sub_results_keep_insertion_order(self):
        result = MonitoringResult('parent', True)
        for name in ('c', 'a', 'b'):
            result.add_sub_result(MonitoringResult(name, True))

        self.assertEqual([sub.name for sub in result.sub_results], ['c', 'a', 'b'])

    def test_to_dict_without_sub_results(self):
        result = MonitoringResult('service', False, 'down')

        self.assertEqual(
            result.to_dict(),
            {'name': 'service', 'isHealthy': False, 'description': 'down'},
        )
        self.assertNotIn('subResults', result.to_dict())

    def test_to_dict_with_nested_sub_results(self):
        child = MonitoringResult('child', True).add_sub_result(MonitoringResult('leaf', False, 'leaf down'))
        result = MonitoringResult('parent', True).add_sub_result(child).add_sub_result(
            MonitoringResult('other', True)
        )

        data = result.to_dict()

        self.assertEqual(len(data['subResults']), 2)
        self.assertEqual(data['subResults'][0]['subResults'][0]['description'], 'leaf down')
        self.assertNotIn('subResults', data['subResults'][1])

    def test_to_dict_equals_json_serialize(self):
        results = [
            MonitoringResult('plain', True),
            MonitoringResult('reason', False, 'why'),
            MonitoringResult('nested', True).add_sub_result(MonitoringResult('sub', False)),
        ]

        for result in results:
            with self.subTest(result=result.name):
                self.assertEqual(result.to_dict(), result.json_serialize())

    def test_json_encoder(self):
        result = MonitoringResult('service', True).add_sub_result(MonitoringResult('sub', True))

        encoded = json.loads(json.dumps({'result': result}, cls=ResultJSONEncoder))

        self.assertEqual(encoded['result'], result.to_dict())

    def test_get_property(self):
        result = MonitoringResult('service', False, 'down')

        self.assertEqual(result.get_property('name'), 'service')
        self.assertIs(result.get_property('isHealthy'), False)
        self.assertEqual(result.get_property('description'), 'down')

    def test_get_property_rejects_unknown_names(self):
        result = MonitoringResult('service', True)

        with self.assertRaisesMessage(ValueError, 'Property "color" does not exist on MonitoringResult'):
            result.get_property('color')
