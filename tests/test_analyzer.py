from collections import Counter

import pytest

from access_report import LogAnalyzer
from access_report.analyzer import percentage, ranked

from conftest import MIXED_LINES, SAMPLE_LINES


def failure_line(ip, day, hour, status=500):
    return f'{ip} - - [{day:02d}/Mar/2024:{hour:02d}:00:00 +0000] "GET /f HTTP/1.1" {status} 0'


@pytest.fixture
def report():
    return LogAnalyzer().analyze_lines(SAMPLE_LINES)


def test_worked_example(report):
    assert report['request_counts'] == {'total': 3, 'get': 2, 'post': 1}
    assert report['unique_ips']['unique_count'] == 2
    assert report['failure_requests'] == {'failed': 2, 'failure_percentage': 66.67}
    assert report['daily_averages'] == {'days': 2, 'average_per_day': 1.5}
    assert report['top_user'] == {'ip': '1.1.1.1', 'requests': 2}


def test_per_ip_breakdown_sorted(report):
    assert report['unique_ips']['per_ip'] == {
        '1.1.1.1': {'get': 1, 'post': 1},
        '2.2.2.2': {'get': 1, 'post': 0},
    }
    assert list(report['unique_ips']['per_ip']) == ['1.1.1.1', '2.2.2.2']


def test_hours_and_trend(report):
    assert report['requests_by_hour'] == [
        {'hour': 5, 'requests': 1},
        {'hour': 6, 'requests': 2},
    ]
    assert report['hourly_trend'] == [
        {'hour': 6, 'direction': 'Increasing', 'previous': 1, 'current': 2},
    ]


def test_status_codes(report):
    assert report['status_codes'] == [
        {'status': '200', 'requests': 1, 'percentage': 33.33},
        {'status': '404', 'requests': 1, 'percentage': 33.33},
        {'status': '500', 'requests': 1, 'percentage': 33.33},
    ]


def test_top_user_by_method(report):
    assert report['top_user_by_method'] == {
        'GET': {'ip': '1.1.1.1', 'requests': 1},
        'POST': {'ip': '1.1.1.1', 'requests': 1},
    }


def test_failure_patterns(report):
    assert report['top_failure_days'] == [
        {'day': '10/Jan/2024', 'failures': 1},
        {'day': '11/Jan/2024', 'failures': 1},
    ]
    assert report['failure_patterns'] == {
        'by_hour': [{'hour': 6, 'failures': 2, 'percentage': 100.0}],
        'top_failure_days': report['top_failure_days'],
    }


def test_missing_method_reports_none():
    report = LogAnalyzer().analyze_lines(SAMPLE_LINES[:1])

    assert report['top_user_by_method']['POST'] == {'ip': 'None', 'requests': 0}
    assert report['failure_requests'] == {'failed': 0, 'failure_percentage': 0.0}
    assert report['top_failure_days'] == []
    assert report['failure_patterns']['by_hour'] == []
    assert report['hourly_trend'] == []


def test_empty_input_guards_denominators():
    report = LogAnalyzer().analyze_lines([])

    assert report['request_counts'] == {'total': 0, 'get': 0, 'post': 0}
    assert report['failure_requests']['failure_percentage'] == 0.0
    assert report['daily_averages'] == {'days': 0, 'average_per_day': 0.0}
    assert report['top_user'] == {'ip': 'None', 'requests': 0}


def test_totals_cover_other_methods():
    analyzer = LogAnalyzer()
    report = analyzer.analyze_lines(MIXED_LINES)
    counts = report['request_counts']
    others = sum(1 for r in analyzer.records if r.method not in ('GET', 'POST'))

    assert counts['total'] == len(MIXED_LINES)
    assert counts['total'] == counts['get'] + counts['post'] + others


def test_hour_histogram_sums_to_parsed_hours():
    analyzer = LogAnalyzer()
    report = analyzer.analyze_lines(MIXED_LINES)
    unparsed = sum(1 for r in analyzer.records if r.hour is None)

    histogram_total = sum(h['requests'] for h in report['requests_by_hour'])
    assert histogram_total == report['request_counts']['total'] - unparsed
    assert [h['hour'] for h in report['requests_by_hour']] == [5, 6, 7, 23]


def test_malformed_lines_count_but_skip_sections():
    report = LogAnalyzer().analyze_lines(MIXED_LINES)

    assert report['request_counts']['total'] == 7
    # blank line has no address, 'garbage' still counts as one
    assert report['unique_ips']['unique_count'] == 5
    assert report['unique_ips']['per_ip']['garbage'] == {'get': 0, 'post': 0}
    assert report['failure_requests']['failed'] == 2
    statuses = {s['status'] for s in report['status_codes']}
    assert statuses == {'200', '201', '404', '500'}


def test_trend_skips_equal_buckets():
    lines = [failure_line('1.1.1.1', 1, hour, 200) for hour in (1, 2, 3, 3, 4)]
    report = LogAnalyzer().analyze_lines(lines)

    assert report['hourly_trend'] == [
        {'hour': 3, 'direction': 'Increasing', 'previous': 1, 'current': 2},
        {'hour': 4, 'direction': 'Decreasing', 'previous': 2, 'current': 1},
    ]


def test_top_failure_days_limited_and_descending():
    lines = []
    for day in range(1, 8):
        lines += [failure_line('9.9.9.9', day, 12)] * day
    report = LogAnalyzer().analyze_lines(lines)
    days = report['top_failure_days']

    assert len(days) == 5
    assert [d['failures'] for d in days] == [7, 6, 5, 4, 3]
    assert days[0]['day'] == '07/Mar/2024'


def test_day_keys_rank_lexicographically_on_ties():
    lines = [
        failure_line('1.1.1.1', 2, 1).replace('Mar/2024', 'Jan/2025'),
        failure_line('1.1.1.1', 9, 1).replace('Mar/2024', 'Dec/2024'),
    ]
    report = LogAnalyzer().analyze_lines(lines)

    assert [d['day'] for d in report['top_failure_days']] == ['02/Jan/2025', '09/Dec/2024']


def test_top_user_tie_breaks_on_smallest_address():
    lines = [failure_line(ip, 1, 1, 200) for ip in ('10.0.0.2', '10.0.0.1', '10.0.0.2', '10.0.0.1')]
    report = LogAnalyzer().analyze_lines(lines)

    assert report['top_user'] == {'ip': '10.0.0.1', 'requests': 2}


def test_analyze_file_matches_analyze_lines(sample_log):
    assert LogAnalyzer().analyze_file(sample_log) == {
        **LogAnalyzer().analyze_lines(SAMPLE_LINES),
        'source': str(sample_log),
    }


def test_carriage_return_inside_line_is_one_request(tmp_path):
    path = tmp_path / "cr.log"
    path.write_bytes(
        b'1.1.1.1 - - [10/Jan/2024:05:00:00 +0000] "GET /a HTTP/1.1" 200 5 "-" "agent\rX"\n'
    )
    report = LogAnalyzer().analyze_file(path)

    assert report['request_counts'] == {'total': 1, 'get': 1, 'post': 0}
    assert report['unique_ips']['unique_count'] == 1


def test_percentage_and_ranked():
    assert percentage(1, 3) == 33.33
    assert percentage(5, 0) == 0.0
    assert ranked(Counter({'b': 2, 'a': 2, 'c': 3})) == [('c', 3), ('a', 2), ('b', 2)]
