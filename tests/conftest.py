"""
Pytest configuration and fixtures.
"""

import logging

import pytest

from ngxconf.logging import ROOT_LOGGER_NAME

SAMPLE_CONFIG = r"""
#COMMENT
# DOUBLE #COMMENT
WORD1 WORD2;
WORD3 {
    WORD4 'SQ1' "DQ\t1";
}"""


@pytest.fixture
def sample_config() -> str:
    """Small document with comments, a simple command and a nested block."""
    return SAMPLE_CONFIG


@pytest.fixture
def nginx_config() -> str:
    """A realistic nginx configuration."""
    return """\
user www-data;
worker_processes auto;

events {
    worker_connections 768;
}

http {
    # Basic settings
    sendfile on;
    log_format main '$remote_addr - "$request" $status';

    upstream backend {
        server 127.0.0.1:8080 weight=5;
        server 127.0.0.1:8081;
    }

    server {
        listen 80 default_server;
        server_name example.com www.example.com;

        location / {
            proxy_pass http://backend;
        }
    }
}
"""


@pytest.fixture
def clean_logging():
    """Remove handlers installed on the package logger by a test."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)
