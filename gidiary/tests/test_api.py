import unittest
from fastapi.testclient import TestClient
from gidiary.api.api_run import app

GEL = {'id': 1, 'name': 'Maurten Gel 100', 'product_type': 'gel', 'carbs_per_serving': 25}
DRINK = {'id': 2, 'name': 'Maurten Drink Mix 320', 'product_type': 'drink', 'carbs_per_serving': 80}


class TestFuelPlanAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        resp = self.client.get('/api/health')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['status'], 'ok')
        self.assertTrue(resp.json()['time'].endswith('Z'))

    def test_generate_plan(self):
        resp = self.client.post('/api/fuel-plan/generate', json={
            'target_carbs': 130, 'duration_minutes': 120, 'products': [GEL, DRINK],
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        for key in ('items', 'total_carbs', 'target_carbs', 'percentage', 'warning', 'error', 'timeline'):
            self.assertIn(key, data)
        self.assertEqual(data['total_carbs'], 130)
        self.assertEqual(data['percentage'], 100)
        self.assertEqual(data['total_label'], '130g')
        self.assertEqual([i['timing_minutes'] for i in data['timeline']], [40, 60, 80])

    def test_generate_plan_zero_target(self):
        resp = self.client.post('/api/fuel-plan/generate', json={
            'target_carbs': 0, 'duration_minutes': 120, 'products': [GEL],
        })
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['error'], 'Target carbs must be greater than 0')
        self.assertEqual(resp.json()['items'], [])

    def test_generate_plan_rejects_zero_duration(self):
        resp = self.client.post('/api/fuel-plan/generate', json={
            'target_carbs': 60, 'duration_minutes': 0, 'products': [GEL],
        })
        self.assertEqual(resp.status_code, 422)

    def test_recalculate_plan(self):
        resp = self.client.post('/api/fuel-plan/recalculate', json={
            'target_carbs': 150,
            'items': [
                {'fuel_product_id': 1, 'product_name': 'Gel', 'quantity': 3,
                 'carbs_per_serving': 25, 'timing_minutes': [30, 60, 90]},
                {'fuel_product_id': 2, 'product_name': 'Drink', 'quantity': 1,
                 'carbs_per_serving': 80, 'timing_minutes': [60]},
            ],
        })
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['total_carbs'], 155)
        self.assertEqual(resp.json()['percentage'], 103)
        self.assertEqual(len(resp.json()['timeline']), 4)

    def test_plan_totals(self):
        resp = self.client.post('/api/fuel-plan/totals', json={
            'duration_minutes': 60,
            'items': [
                {'fuel_product_id': 1, 'product_name': 'Gel', 'timing_minutes': 20, 'carbs_total': 25},
                {'fuel_product_id': 2, 'product_name': 'Drink', 'timing_minutes': 40, 'carbs_total': 80},
            ],
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['total_carbs'], 105)
        self.assertEqual(data['carb_rate'], 105)
        self.assertEqual(data['rate_label'], '105g/h')
        self.assertEqual(data['duration_label'], '1h')


class TestCarbsAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_required_carbs(self):
        resp = self.client.get('/api/carbs/required', params={'duration_minutes': 90, 'target_g_per_hour': 60})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['required_carbs'], 90)
        self.assertEqual(resp.json()['label'], '90g')

    def test_carb_rate(self):
        resp = self.client.get('/api/carbs/rate', params={'total_carbs': 90, 'duration_minutes': 90})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['carb_rate'], 60)
        self.assertEqual(resp.json()['label'], '60g/h')

    def test_carb_rate_zero_duration(self):
        resp = self.client.get('/api/carbs/rate', params={'total_carbs': 90, 'duration_minutes': 0})
        self.assertEqual(resp.status_code, 400)

    def test_validate_product(self):
        resp = self.client.post('/api/fuel-products/validate', json={
            'name': '  SiS Beta Fuel  ', 'product_type': 'gel', 'carbs_per_serving': 40,
        })
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()['valid'])
        self.assertEqual(resp.json()['product']['name'], 'SiS Beta Fuel')

    def test_validate_product_errors(self):
        bad = [
            {'name': '   ', 'product_type': 'gel', 'carbs_per_serving': 40},
            {'name': 'Gel', 'product_type': 'pill', 'carbs_per_serving': 40},
            {'name': 'Gel', 'product_type': 'gel', 'carbs_per_serving': 0},
            {'name': 'Gel', 'product_type': 'gel', 'carbs_per_serving': 201},
        ]
        for body in bad:
            resp = self.client.post('/api/fuel-products/validate', json=body)
            self.assertEqual(resp.status_code, 422, body)
            self.assertIn('detail', resp.json())


class TestSessionAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_next_intake_ready(self):
        resp = self.client.post('/api/session/next-intake', json={
            'elapsed_minutes': 44,
            'plan': [
                {'fuel_product_id': 1, 'product_name': 'Gel', 'timing_minutes': 45, 'carbs_total': 25},
                {'fuel_product_id': 2, 'product_name': 'Drink', 'timing_minutes': 90, 'carbs_total': 80},
            ],
        })
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['state'], 'ready')
        self.assertEqual(data['intake']['product_name'], 'Gel')
        self.assertEqual(data['intake']['carbs_per_serving'], 25)

    def test_next_intake_all_logged(self):
        resp = self.client.post('/api/session/next-intake', json={
            'elapsed_minutes': 50,
            'logged_timings': [45],
            'plan': [{'fuel_product_id': 1, 'product_name': 'Gel', 'timing_minutes': 45, 'carbs_total': 25}],
        })
        self.assertEqual(resp.json()['state'], 'none')

    def test_progress(self):
        resp = self.client.get('/api/session/progress',
                               params={'completed': 6, 'total': 12, 'current_week': 2, 'total_weeks': 4})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['percent'], 50)
        self.assertEqual(resp.json()['week_label'], 'Week 2 of 4')

    def test_summary(self):
        resp = self.client.post('/api/session/summary', json={'events': [
            {'session_log_id': 1, 'event_type': 'intake', 'timestamp_offset_seconds': 1200,
             'data': {'carbs_consumed': 25}},
            {'session_log_id': 1, 'event_type': 'discomfort', 'timestamp_offset_seconds': 1500,
             'data_json': '{"score": 3}'},
        ]})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['intake_count'], 1)
        self.assertEqual(resp.json()['discomfort_count'], 1)
        self.assertEqual(resp.json()['total_label'], '25g')

    def test_summary_rejects_malformed_data_json(self):
        for raw in ('not json', '[1, 2]'):
            resp = self.client.post('/api/session/summary', json={'events': [
                {'session_log_id': 1, 'event_type': 'intake', 'data_json': raw},
            ]})
            self.assertEqual(resp.status_code, 422, raw)
            self.assertEqual(resp.json()['detail'][0]['loc'][-1], 'data_json')

    def test_summary_rejects_unknown_event_type(self):
        resp = self.client.post('/api/session/summary', json={'events': [
            {'session_log_id': 1, 'event_type': 'sprint'},
        ]})
        self.assertEqual(resp.status_code, 422)


class TestAnalysisAPI(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_recommendations_need_sessions(self):
        resp = self.client.post('/api/analysis/recommendations', json={
            'sessions': [{'id': 1, 'carb_rate_per_hour': 60}],
        })
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['count'], 1)
        self.assertEqual(resp.json()['recommendations'][0]['type'], 'info')

    def test_recommendations_with_history(self):
        sessions = [{'id': i, 'carb_rate_per_hour': 70} for i in range(1, 6)]
        events = [
            {'session_log_id': i, 'event_type': 'intake', 'timestamp_offset_seconds': 1200,
             'data': {'fuel_product_id': 1, 'product_name': 'Gel'}}
            for i in range(1, 6)
        ]
        resp = self.client.post('/api/analysis/recommendations', json={'sessions': sessions, 'events': events})
        self.assertEqual(resp.status_code, 200)
        titles = [r['title'] for r in resp.json()['recommendations']]
        self.assertIn('Gel works well', titles)
        self.assertIn('Optimal carb rate: 60-80g/h', titles)

    def test_recommendations_reject_malformed_data_json(self):
        resp = self.client.post('/api/analysis/recommendations', json={
            'sessions': [{'id': 1}],
            'events': [{'session_log_id': 1, 'event_type': 'intake', 'data_json': '{"fuel_product_id": '}],
        })
        self.assertEqual(resp.status_code, 422)

    def test_program_reasoning(self):
        resp = self.client.get('/api/programs/reasoning',
                               params=[('gi_issue', 'cramping'), ('session_rates', 40), ('session_rates', 50)])
        self.assertEqual(resp.status_code, 200)
        self.assertIn('cramping', resp.json()['reasoning'])
        self.assertEqual(resp.json()['start_intensity'], 40)

    def test_program_reasoning_defaults(self):
        resp = self.client.get('/api/programs/reasoning')
        self.assertEqual(resp.json()['start_intensity'], 30)


if __name__ == '__main__':
    unittest.main()
