import logging
from pathlib import Path

from pytest import raises

from studentquiz.app import create_app
from studentquiz.testing.fixtures import TestConfig

YAML_LOGGING = """\
loggers:
  studentquiz.yaml_test:
    level: ERROR
"""

INI_LOGGING = """\
[loggers]
keys=root,initest

[handlers]
keys=

[formatters]
keys=

[logger_root]
level=WARNING
handlers=

[logger_initest]
level=CRITICAL
handlers=
qualname=studentquiz.ini_test
"""


def test_default_logging(app):
    assert logging.getLogger("studentquiz").level == logging.INFO


def test_logging_config_yaml(tmp_path: Path):
    config_file = tmp_path / "logging.yml"
    config_file.write_text(YAML_LOGGING)

    class Config(TestConfig):
        LOGGING_CONFIG_FILE = str(config_file)

    create_app(config=Config)
    assert logging.getLogger("studentquiz.yaml_test").level == logging.ERROR


def test_logging_config_relative_to_instance_path(tmp_path: Path):
    (tmp_path / "logging.yml").write_text(
        YAML_LOGGING.replace("yaml_test", "instance_test")
    )

    class Config(TestConfig):
        LOGGING_CONFIG_FILE = "logging.yml"

    create_app(config=Config, instance_path=str(tmp_path))
    assert logging.getLogger("studentquiz.instance_test").level == logging.ERROR


def test_logging_config_ini(tmp_path: Path):
    config_file = tmp_path / "logging.ini"
    config_file.write_text(INI_LOGGING)

    class Config(TestConfig):
        LOGGING_CONFIG_FILE = str(config_file)

    create_app(config=Config)
    assert logging.getLogger("studentquiz.ini_test").level == logging.CRITICAL


class ProductionConfig(TestConfig):
    TESTING = False
    DEBUG = False
    SECRET_KEY = "CHANGEME"


def test_default_secret_key_refused():
    with raises(SystemExit):
        create_app(config=ProductionConfig)


def test_default_secret_key_in_debug():
    class Config(ProductionConfig):
        DEBUG = True

    app = create_app(config=Config)
    assert app.config["SECRET_KEY"] == "CHANGEME"


def test_json_error_handler(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.json["error"] == 404
