# infrastructure/bdd/environment.py
"""
behave hooks that give every scenario a fresh context.web_api.

features/environment.py:

    from infrastructure.bdd.environment import (  # noqa: F401
        after_step,
        before_all,
        before_scenario,
        before_step,
    )

features/steps/web_api.py:

    import application.steps.web_api_steps  # noqa: F401

Userdata (behave -D name=value) wins over WEBAPI_* settings:
  base_url, config (suite config file), env_file, log_level,
  log_format (loguru | console).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from application.ports.logger import LoggerPort
from application.ports.requests_client import RequestsSessionHttpClient
from application.web_api_context import WebApiContext
from domain.suite import SuiteConfig
from infrastructure.config.settings import Settings, load_settings
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.suite import load_suite_config


def build_web_api_context(
    settings: Settings,
    suite: SuiteConfig,
    logger: LoggerPort,
    base_url: Optional[str] = None,
) -> WebApiContext:
    http = suite.http
    timeout_sec = http.timeout_sec if http.timeout_sec is not None else settings.timeout_sec

    client = RequestsSessionHttpClient(
        base_url=base_url or http.base_url or settings.base_url,
        base_headers=dict(http.headers),
        timeout_sec=timeout_sec,
    )
    ctx = WebApiContext(client=client, logger=logger)
    for key, value in suite.placeholders.items():
        ctx.set_placeholder(key, value)
    return ctx


def _status_name(step) -> str:
    # behave >= 1.2.6 uses a Status enum, older releases a plain string
    return getattr(step.status, "name", str(step.status))


def before_all(context) -> None:
    userdata = context.config.userdata
    settings = load_settings(Path(userdata.get("env_file", ".env")))
    config_file = userdata.get("config") or settings.config_file

    context.web_api_settings = settings
    context.web_api_suite = load_suite_config(config_file) if config_file else SuiteConfig()

    if userdata.get("log_format", "loguru") == "console":
        context.web_api_logger = ConsoleLogger()
    else:
        setup_console_logging(level=userdata.get("log_level") or settings.log_level)
        context.web_api_logger = LoguruLogger()


def before_scenario(context, scenario) -> None:
    logger = context.web_api_logger.bind(scenario=scenario.name)
    context.web_api_scenario_logger = logger
    context.web_api = build_web_api_context(
        context.web_api_settings,
        context.web_api_suite,
        logger,
        base_url=context.config.userdata.get("base_url"),
    )


def before_step(context, step) -> None:
    context.web_api_scenario_logger.info("step.start", step=step.name)


def after_step(context, step) -> None:
    logger = context.web_api_scenario_logger
    status = _status_name(step)
    if status == "failed":
        logger.warning("step.failed", step=step.name, error=step.error_message)
    logger.info("step.end", step=step.name, status=status, elapsed_ms=int((step.duration or 0) * 1000))
