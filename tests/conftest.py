import pytest

SAMPLE_LINES = [
    '1.1.1.1 - - [10/Jan/2024:05:00:00 +0000] "GET /a HTTP/1.1" 200 512 "-" "curl/8.0"',
    '1.1.1.1 - - [10/Jan/2024:06:00:00 +0000] "POST /b HTTP/1.1" 500 0 "-" "curl/8.0"',
    '2.2.2.2 - - [11/Jan/2024:06:00:00 +0000] "GET /c HTTP/1.1" 404 128',
]

MIXED_LINES = SAMPLE_LINES + [
    '3.3.3.3 - - [12/Jan/2024:23:59:59 +0000] "PUT /x HTTP/1.1" 201 0',
    '4.4.4.4 - - [12/Jan/2024:07:15:00 +0000] "-" 400 0',
    'garbage line',
    '',
]


def write_log(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_log(tmp_path):
    return write_log(tmp_path / "access.log", SAMPLE_LINES)


@pytest.fixture
def mixed_log(tmp_path):
    return write_log(tmp_path / "mixed.log", MIXED_LINES)
