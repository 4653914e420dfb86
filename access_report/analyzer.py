"""Access Report - Core analysis engine"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

from rich.progress import Progress, SpinnerColumn, TextColumn

from .models import LogRecord
from .parser import parse_line, parse_lines, read_lines, validate_log_file
from .patterns import NO_ADDRESS, TOP_FAILURE_DAYS, TRACKED_METHODS

logger = logging.getLogger(__name__)


def percentage(part: int, whole: int) -> float:
    """part/whole as a percentage rounded to 2 places, 0 when whole is 0"""
    return round(part / whole * 100, 2) if whole else 0.0


def ranked(counts: Counter) -> List[Tuple[str, int]]:
    """Highest count first; equal counts fall back to the key, ascending."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def top_entry(counts: Counter) -> Dict:
    if not counts:
        return {'ip': NO_ADDRESS, 'requests': 0}
    ip, count = ranked(counts)[0]
    return {'ip': ip, 'requests': count}


class LogAnalyzer:
    """Main log analyzer class"""

    def __init__(self, console=None):
        self.console = console
        self.source: Optional[str] = None
        self.records: List[LogRecord] = []

    @property
    def failures(self) -> List[LogRecord]:
        return [r for r in self.records if r.is_failure]

    def analyze_file(self, filepath) -> Dict:
        path = validate_log_file(filepath)
        logger.info("Starting log analysis for file: %s", path)

        lines = read_lines(path)
        self.source = str(filepath)
        self.records = []

        if self.console:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=self.console,
                transient=True
            ) as progress:
                task = progress.add_task("Parsing log...", total=len(lines))

                for i, line in enumerate(lines, 1):
                    self.records.append(parse_line(line, i))
                    progress.update(task, advance=1)
        else:
            self.records = parse_lines(lines)

        logger.info("Parsed %d records", len(self.records))
        return self.generate_report()

    def analyze_lines(self, lines: Iterable[str]) -> Dict:
        self.source = None
        self.records = parse_lines(lines)
        return self.generate_report()

    def request_counts(self) -> Dict:
        """Total, GET and POST request counts"""
        methods = Counter(r.method for r in self.records)
        return {
            'total': len(self.records),
            'get': methods['GET'],
            'post': methods['POST'],
        }

    def unique_ips(self) -> Dict:
        """Distinct clients and their GET/POST counts"""
        grouped = Counter((r.client_address, r.method) for r in self.records
                          if r.client_address is not None)
        per_ip = {ip: {'get': 0, 'post': 0}
                  for ip in sorted({ip for ip, _ in grouped})}
        for (ip, method), count in grouped.items():
            if method in TRACKED_METHODS:
                per_ip[ip][method.lower()] += count
        return {'unique_count': len(per_ip), 'per_ip': per_ip}

    def failure_requests(self) -> Dict:
        """4xx/5xx count and share of all requests"""
        failed = len(self.failures)
        return {
            'failed': failed,
            'failure_percentage': percentage(failed, len(self.records)),
        }

    def top_user(self) -> Dict:
        """Most active client address"""
        return top_entry(Counter(r.client_address for r in self.records
                                 if r.client_address is not None))

    def daily_averages(self) -> Dict:
        """Distinct days and average requests per day"""
        days = len({r.day_key for r in self.records if r.day_key is not None})
        return {
            'days': days,
            'average_per_day': round(len(self.records) / days, 2) if days else 0.0,
        }

    def top_failure_days(self) -> List[Dict]:
        """Days with the most failures"""
        per_day = Counter(r.day_key for r in self.failures if r.day_key is not None)
        return [{'day': day, 'failures': count}
                for day, count in ranked(per_day)[:TOP_FAILURE_DAYS]]

    def requests_by_hour(self) -> List[Dict]:
        """Request histogram by hour"""
        per_hour = Counter(r.hour for r in self.records if r.hour is not None)
        return [{'hour': hour, 'requests': per_hour[hour]} for hour in sorted(per_hour)]

    def hourly_trend(self) -> List[Dict]:
        """Direction of change between adjacent hour buckets"""
        buckets = self.requests_by_hour()
        trend = []
        for previous, current in zip(buckets, buckets[1:]):
            if current['requests'] == previous['requests']:
                continue
            trend.append({
                'hour': current['hour'],
                'direction': 'Increasing' if current['requests'] > previous['requests'] else 'Decreasing',
                'previous': previous['requests'],
                'current': current['requests'],
            })
        return trend

    def status_codes(self) -> List[Dict]:
        """Requests per status code"""
        total = len(self.records)
        per_status = Counter(r.status_code for r in self.records if r.status_code is not None)
        return [{'status': status, 'requests': count, 'percentage': percentage(count, total)}
                for status, count in ranked(per_status)]

    def top_user_by_method(self) -> Dict:
        """Most active client for each tracked method"""
        return {
            method: top_entry(Counter(r.client_address for r in self.records
                                      if r.method == method and r.client_address is not None))
            for method in TRACKED_METHODS
        }

    def failure_patterns(self) -> Dict:
        """Failures by hour plus the top failure days"""
        failures = self.failures
        per_hour = Counter(r.hour for r in failures if r.hour is not None)
        return {
            'by_hour': [{'hour': hour,
                         'failures': per_hour[hour],
                         'percentage': percentage(per_hour[hour], len(failures))}
                        for hour in sorted(per_hour)],
            'top_failure_days': self.top_failure_days(),
        }

    def generate_report(self) -> Dict:
        logger.debug("Computing report sections over %d records", len(self.records))
        return {
            'source': self.source,
            'request_counts': self.request_counts(),
            'unique_ips': self.unique_ips(),
            'failure_requests': self.failure_requests(),
            'top_user': self.top_user(),
            'daily_averages': self.daily_averages(),
            'top_failure_days': self.top_failure_days(),
            'requests_by_hour': self.requests_by_hour(),
            'hourly_trend': self.hourly_trend(),
            'status_codes': self.status_codes(),
            'top_user_by_method': self.top_user_by_method(),
            'failure_patterns': self.failure_patterns(),
        }
