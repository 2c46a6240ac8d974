#!/usr/bin/env python3
"""
HTTP tests for the Company API, using FastAPI's TestClient.

Run with:
    python -m pytest tests/test_api.py
"""
import json
import os
import shutil
import sys
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi.testclient import TestClient

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from company_api.app.core.config import Settings
from company_api.app.core.store import CompanyStore
from company_api.app.main import create_app
from company_api.app.services import CompanyService


class SteppingClock:

    def __init__(self):
        self.current = datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.current += timedelta(minutes=1)
        return self.current


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.mkdtemp()
        self.data_path = os.path.join(self.tmp, 'data', 'data.json')
        self.app = create_app(Settings(data_file=self.data_path, log_file=''))
        self.client = TestClient(self.app)

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def _on_disk(self):
        with open(self.data_path) as fh:
            return json.load(fh)


class TestRoot(ApiTestCase):

    def test_greeting(self):
        resp = self.client.get('/')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.text, 'hello world')
        self.assertTrue(resp.headers['content-type'].startswith('text/plain'))


class TestCompanyLifecycle(ApiTestCase):

    def setUp(self):
        super().setUp()
        store = CompanyStore(self.data_path)
        self.app.state.company_service = CompanyService(store, clock=SteppingClock())

    def test_end_to_end(self):
        resp = self.client.post('/companies', json={'name': 'Acme'})
        self.assertEqual(resp.status_code, 201)
        created = resp.json()
        company_id = created['id']
        self.assertEqual(created['name'], 'Acme')
        self.assertEqual(set(created), {'id', 'name', 'createdAt', 'updatedAt'})

        resp = self.client.get(f'/companies/{company_id}')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), created)

        resp = self.client.put(f'/companies/{company_id}', json={'name': 'Acme Corp'})
        self.assertEqual(resp.status_code, 200)
        updated = resp.json()
        self.assertEqual(updated['id'], company_id)
        self.assertEqual(updated['name'], 'Acme Corp')
        self.assertEqual(updated['createdAt'], created['createdAt'])
        self.assertNotEqual(updated['updatedAt'], created['updatedAt'])

        resp = self.client.delete(f'/companies/{company_id}')
        self.assertEqual(resp.status_code, 204)
        self.assertEqual(resp.content, b'')

        resp = self.client.get(f'/companies/{company_id}')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {'error': 'Company not found'})

    def test_list_returns_all_companies(self):
        self.client.post('/companies', json={'name': 'Acme'})
        self.client.post('/companies', json={'name': 'Globex'})
        resp = self.client.get('/companies')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([c['name'] for c in resp.json()], ['Acme', 'Globex'])

    def test_list_empty_bootstraps_file(self):
        resp = self.client.get('/companies')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])
        self.assertEqual(self._on_disk(), [])

    def test_extra_fields_are_returned(self):
        os.makedirs(os.path.dirname(self.data_path), exist_ok=True)
        with open(self.data_path, 'w') as fh:
            json.dump([{'id': 'x1', 'name': 'Acme', 'createdAt': 't0', 'updatedAt': 't0',
                        'website': 'https://acme.example'}], fh)
        self.assertEqual(self.client.get('/companies/x1').json()['website'], 'https://acme.example')
        resp = self.client.put('/companies/x1', json={'name': 'Acme Corp'})
        self.assertEqual(resp.json()['website'], 'https://acme.example')
        self.assertEqual(self._on_disk()[0]['website'], 'https://acme.example')

    def test_records_without_timestamps_are_returned_unchanged(self):
        os.makedirs(os.path.dirname(self.data_path), exist_ok=True)
        with open(self.data_path, 'w') as fh:
            json.dump([{'id': 'a', 'name': 'A'}], fh)
        resp = self.client.get('/companies')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [{'id': 'a', 'name': 'A'}])
        resp = self.client.get('/companies/a')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {'id': 'a', 'name': 'A'})

    def test_legacy_record_gains_updated_at_on_rename(self):
        os.makedirs(os.path.dirname(self.data_path), exist_ok=True)
        with open(self.data_path, 'w') as fh:
            json.dump([{'id': 'a', 'name': 'A'}], fh)
        resp = self.client.put('/companies/a', json={'name': 'B'})
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body['name'], 'B')
        self.assertIn('updatedAt', body)
        self.assertNotIn('createdAt', body)


class TestValidation(ApiTestCase):

    def test_create_without_name_is_rejected(self):
        for body in ({}, {'name': ''}, {'name': None}):
            with self.subTest(body=body):
                resp = self.client.post('/companies', json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {'error': 'Name is required'})
        self.assertEqual(self.client.get('/companies').json(), [])

    def test_whitespace_name_is_accepted_as_sent(self):
        resp = self.client.post('/companies', json={'name': '   '})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()['name'], '   ')
        resp = self.client.put(f"/companies/{resp.json()['id']}", json={'name': ' '})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['name'], ' ')

    def test_create_without_body_is_rejected(self):
        resp = self.client.post('/companies')
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {'error': 'Name is required'})

    def test_create_with_non_string_name_is_rejected(self):
        resp = self.client.post('/companies', json={'name': 42})
        self.assertEqual(resp.status_code, 400)
        self.assertIn('error', resp.json())

    def test_malformed_json_is_rejected(self):
        resp = self.client.post('/companies', content=b'{"name": ',
                                headers={'content-type': 'application/json'})
        self.assertEqual(resp.status_code, 400)
        self.assertIn('error', resp.json())

    def test_update_without_name_is_rejected_before_lookup(self):
        created = self.client.post('/companies', json={'name': 'Acme'}).json()
        resp = self.client.put(f"/companies/{created['id']}", json={'name': ''})
        self.assertEqual(resp.status_code, 400)
        resp = self.client.put('/companies/missing', json={})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self.client.get(f"/companies/{created['id']}").json()['name'], 'Acme')


class TestNotFound(ApiTestCase):

    def test_update_missing(self):
        resp = self.client.put('/companies/missing', json={'name': 'Other'})
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {'error': 'Company not found'})

    def test_delete_missing(self):
        resp = self.client.delete('/companies/missing')
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {'error': 'Company not found'})


class TestServerErrors(ApiTestCase):

    def setUp(self):
        super().setUp()
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def test_write_failure_is_500(self):
        blocker = os.path.join(self.tmp, 'blocker')
        with open(blocker, 'w') as fh:
            fh.write('')
        self.app.state.company_service = CompanyService(
            CompanyStore(os.path.join(blocker, 'data.json')))
        resp = self.client.post('/companies', json={'name': 'Acme'})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {'error': 'Internal server error'})

    def test_unexpected_read_error_is_500(self):
        service = self.app.state.company_service
        with patch.object(service, 'get_all', side_effect=RuntimeError('boom')):
            resp = self.client.get('/companies')
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {'error': 'Internal server error'})
        self.assertNotIn('boom', resp.text)


if __name__ == '__main__':
    unittest.main()
