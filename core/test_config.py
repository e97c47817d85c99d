from core.config import Config, load_config


def test_missing_file_writes_defaults(tmp_path):
    config_file = tmp_path / "posts-proxy" / "config.json"

    config = load_config(config_file)

    assert config_file.exists()
    assert config.proxy.port == 8080
    assert config.upstream.base_url == "https://jsonplaceholder.typicode.com/posts"
    assert config.upstream.default_headers == {"Content-Type": "application/json"}


def test_existing_file_is_loaded(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text('{"proxy": {"port": 9000}, "upstream": {"base_url": "http://upstream/posts"}}')

    config = load_config(config_file)

    assert config.proxy.port == 9000
    assert config.upstream.base_url == "http://upstream/posts"
    assert config.limits.max_connections == 100


def test_corrupt_file_is_backed_up(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json")

    config = load_config(config_file)

    assert config == Config()
    assert (tmp_path / "config.json.bak").read_text() == "{not json"
    assert Config.model_validate_json(config_file.read_text()) == Config()


def test_invalid_port_is_backed_up(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text('{"proxy": {"port": 70000}}')

    config = load_config(config_file)

    assert config.proxy.port == 8080
    assert (tmp_path / "config.json.bak").exists()
