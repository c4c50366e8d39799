import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from htmldiff import diff
from htmldiff.comparator.report_builder import ReportBuilder


def build_report():
    builder = ReportBuilder()
    builder.add_comparison('a.html', 'b.html', diff('<div><x></x><y>1</y></div>', '<div><z></z><y>2</y><w></w></div>'))
    builder.add_comparison('c.html', 'd.html', diff('<p>same</p>', '<p>same</p>'))
    return builder


def test_collect_metrics():
    builder = ReportBuilder()
    metrics = builder.collect_metrics(diff('<div><x></x><y>1</y></div>', '<div><z></z><y>2</y><w></w></div>'))
    assert metrics == {
        'node_type': 0,
        'node_name': 1,
        'node_attributes': 0,
        'node_text': 1,
        'not_present': 1,
        'total': 3,
    }


def test_text_report():
    report = build_report().generate_text_report()
    lines = report.splitlines()
    assert lines[0] == 'a.html vs b.html: 3 difference(s)'
    assert lines[1] == '  /div[0]: [NODE_NAME] expected tag `x`, found tag `z`'
    assert lines[-1] == 'c.html and d.html are identical'


def test_json_report():
    data = json.loads(build_report().generate('json'))
    first, second = data['comparisons']
    assert first['original'] == 'a.html'
    assert first['summary']['total'] == 3
    assert [d['category'] for d in first['differences']] == ['node_name', 'node_text', 'not_present']
    assert first['differences'][2]['elem'] is None
    assert second['differences'] == []


def test_html_report_is_escaped(tmp_path):
    output = tmp_path / 'report.html'
    report = build_report().generate('html', output)
    assert output.read_text(encoding='utf-8') == report
    assert '&lt;w&gt;&lt;/w&gt;' in report
    assert '<w></w>' not in report
    assert 'No structural differences.' in report


def test_empty_text_report():
    assert ReportBuilder().generate_text_report() == ''


def test_unknown_format():
    with pytest.raises(ValueError):
        ReportBuilder().generate('xml')
