from clocker.backend.exporters.csv import iter_rows, render_csv


def test_render_csv_basic():
    rows = [{"date": "2025-01-15", "start_am": "08:30", "end_am": ""}]
    out = render_csv(rows, ["date", "start_am", "end_am"])
    assert out == "date,start_am,end_am\n2025-01-15,08:30,\n"


def test_render_csv_unknown_keys_ignored():
    rows = [{"date": "2025-01-15", "extra": 123}]
    out = render_csv(rows, ["date"])
    assert ",123" not in out


def test_iter_rows_skips_blank_lines_and_keeps_line_numbers():
    text = "date,a\n\n2025-01-15,x\n   \n2025-01-16,y\n"
    assert list(iter_rows(text)) == [
        (1, ["date", "a"]),
        (3, ["2025-01-15", "x"]),
        (5, ["2025-01-16", "y"]),
    ]


def test_iter_rows_ignores_quoting():
    text = 'date,a\r\n"x,y",z\r\n'
    assert list(iter_rows(text)) == [
        (1, ["date", "a"]),
        (2, ['"x', 'y"', "z"]),
    ]
