import sys
import os
import io
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from htmldiff.config import DiffConfig
from htmldiff.web.app import create_app


@pytest.fixture
def client():
    app = create_app(DiffConfig())
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_diff_json_body(client):
    response = client.post('/diff', json={
        'original': '<div><foo></foo></div>',
        'modified': '<div><p></p></div>',
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['summary']['total'] == 1
    assert data['summary']['node_name'] == 1
    assert data['differences'][0]['path'] == 'div[0]'


def test_diff_uploaded_files(client):
    response = client.post('/diff', data={
        'original_file': (io.BytesIO(b'<p>same</p>'), 'a.html'),
        'modified_file': (io.BytesIO(b'<!-- c --><p>same</p>'), 'b.html'),
    }, content_type='multipart/form-data')
    assert response.status_code == 200
    assert response.get_json()['differences'] == []


def test_diff_missing_input(client):
    response = client.post('/diff', json={'original': '<p></p>'})
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_diff_upload_not_utf8(client):
    response = client.post('/diff', data={
        'original_file': (io.BytesIO(b'<p>\xff\xfe</p>'), 'a.html'),
        'modified_file': (io.BytesIO(b'<p></p>'), 'b.html'),
    }, content_type='multipart/form-data')
    assert response.status_code == 400
    assert 'original_file is not valid UTF-8' in response.get_json()['error']


def test_diff_json_body_not_an_object(client):
    response = client.post('/diff', json=['<p></p>', '<p></p>'])
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_diff_too_deep():
    app = create_app(DiffConfig(max_depth=2))
    nested = '<div>' * 5 + '</div>' * 5
    with app.test_client() as client:
        response = client.post('/diff', json={'original': nested, 'modified': nested})
    assert response.status_code == 422


def test_create_app_reads_environment(monkeypatch):
    monkeypatch.setenv('HTMLDIFF_MAX_DEPTH', '7')
    assert create_app().config['DIFF_CONFIG'].max_depth == 7


def test_create_app_rejects_bad_environment(monkeypatch):
    monkeypatch.setenv('HTMLDIFF_MAX_DEPTH', 'deep')
    with pytest.raises(ValueError):
        create_app()
