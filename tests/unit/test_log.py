# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the terms described in the LICENSE file in
# the root directory of this source tree.

import logging

import pytest

from vector_store_client import log


@pytest.fixture(autouse=True)
def restore_levels():
    saved = dict(log._category_levels)
    yield
    log._category_levels.clear()
    log._category_levels.update(saved)


def test_parse_single_category():
    assert log.parse_environment_config("client=debug") == {"client": logging.DEBUG}


def test_parse_all_applies_to_every_category():
    levels = log.parse_environment_config("all=error")
    assert levels["client::dispatcher"] == logging.ERROR
    assert levels[log.UNCATEGORIZED] == logging.ERROR


def test_parse_skips_invalid_pairs():
    assert log.parse_environment_config("client;client::http=loud;;client::pagination=info") == {
        "client::pagination": logging.INFO
    }


def test_subcategory_falls_back_to_parent():
    log._category_levels.pop("client::dispatcher")
    log._category_levels["client"] = logging.INFO

    logger = log.get_logger("vector_store_client.test_fallback", category="client::dispatcher")

    assert logger.logger.level == logging.INFO
    assert logger.extra == {"category": "client::dispatcher"}


def test_get_logger_uses_configured_level():
    log.setup_logging({"client::http": logging.DEBUG})

    logger = log.get_logger("vector_store_client.test_http", category="client::http")

    assert logger.isEnabledFor(logging.DEBUG)
