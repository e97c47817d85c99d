import json

from ui.log_utils import clear_logs, write_cli_log, write_incoming_log


def test_incoming_log_masks_sensitive_headers(tmp_path):
    path = write_incoming_log(
        "POST",
        "/posts",
        {"Authorization": "Bearer abcdefghijklmnop", "X-Api-Key": "short", "Accept": "*/*"},
        '{"title": "t"}',
        log_root=tmp_path,
    )

    entry = json.loads(path.read_text())
    assert path.parent == tmp_path / "incoming"
    assert entry["method"] == "POST"
    assert entry["headers"]["Authorization"] == "Bearer...mnop"
    assert entry["headers"]["X-Api-Key"] == "***"
    assert entry["headers"]["Accept"] == "*/*"


def test_cli_log_appends_extra_fields(tmp_path):
    log_file = tmp_path / "proxy.log"

    write_cli_log("FORWARD", "GET https://upstream.test/posts", log_file=log_file, status=200)
    write_cli_log("ERROR", "boom", log_file=log_file)

    lines = log_file.read_text().splitlines()
    assert lines[0].endswith("FORWARD: GET https://upstream.test/posts status=200")
    assert lines[1].endswith("ERROR: boom")


def test_clear_logs_removes_incoming_entries(tmp_path):
    path = write_incoming_log("GET", "/posts", {}, "", log_root=tmp_path)

    clear_logs(tmp_path)

    assert not path.exists()
