"""
Fundraiser configuration.

Settings are read from three sources, highest priority first:

    1. Environment variables - for hosted deployments
    2. Config file (config/fundraiser.ini, or the file named by
       FUNDRAISER_CONFIG)
    3. Built-in defaults

``load_settings()`` is called once at startup and the result is passed
to the composition root.  Nothing reads configuration at import time.

Environment Variable Mapping:
    FUNDRAISER_HOST                     -> server.host
    PORT / FUNDRAISER_PORT              -> server.port
    FUNDRAISER_STATIC_DIR               -> server.static_dir
    FUNDRAISER_RECIPIENT_HANDLE         -> payment.recipient_handle
    FUNDRAISER_PAYMENT_BASE_URL         -> payment.base_url
    FUNDRAISER_PRICE_PER_PLAYER_LINE    -> pricing.price_per_player_line
    FUNDRAISER_PRICE_PER_BUSINESS_LINE  -> pricing.price_per_business_line
    FUNDRAISER_SMTP_HOST                -> mail.host
    FUNDRAISER_SMTP_PORT                -> mail.port
    EMAIL_USER                          -> mail.user
    EMAIL_PASS                          -> mail.password
    FUNDRAISER_SMTP_TLS                 -> mail.use_tls
    FUNDRAISER_SMTP_TIMEOUT             -> mail.timeout_seconds
    FUNDRAISER_MAIL_SENDER              -> mail.sender
    FUNDRAISER_OPERATOR_ADDRESS         -> mail.operator_address
    FUNDRAISER_SALES_ADDRESS            -> mail.sales_address
    FUNDRAISER_LEDGER_PATH              -> ledger.path
    FUNDRAISER_LOG_LEVEL                -> logging.level
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path

from fundraiser.domain.model.value_objects import (
    DEFAULT_PRICE_PER_BUSINESS_LINE,
    DEFAULT_PRICE_PER_PLAYER_LINE,
)

# Project root directory (contains src/, config/, data/)
PROJECT_ROOT = Path(__file__).resolve().parents[3]

CONFIG_FILE = PROJECT_ROOT / "config" / "fundraiser.ini"


@dataclass
class ServerSettings:
    """Network server configuration."""

    host: str = "0.0.0.0"  # nosec B104 - intentional for server binding
    port: int = 3000
    static_dir: str = ""


@dataclass
class PaymentSettings:
    recipient_handle: str = ""
    base_url: str = "https://venmo.com/"


@dataclass
class PricingSettings:
    price_per_player_line: int = DEFAULT_PRICE_PER_PLAYER_LINE
    price_per_business_line: int = DEFAULT_PRICE_PER_BUSINESS_LINE


@dataclass
class MailSettings:
    """SMTP relay and mailbox configuration.

    ``sender`` and ``operator_address`` fall back to the login user, and
    ``sales_address`` falls back to the operator mailbox.
    """

    host: str = "smtp.gmail.com"
    port: int = 587
    user: str = ""
    password: str = ""
    use_tls: bool = True
    timeout_seconds: float = 10.0
    sender: str = ""
    operator_address: str = ""
    sales_address: str = ""

    @property
    def from_address(self) -> str:
        return self.sender or self.user

    @property
    def operator_mailbox(self) -> str:
        return self.operator_address or self.user

    @property
    def sales_mailbox(self) -> str:
        return self.sales_address or self.operator_mailbox


@dataclass
class LedgerSettings:
    path: str = "data/orders.csv"

    @property
    def absolute_path(self) -> Path:
        """Get absolute path to the ledger file."""
        p = Path(self.path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class LoggingSettings:
    level: str = "INFO"


@dataclass
class Settings:
    """Complete application configuration."""

    server: ServerSettings = field(default_factory=ServerSettings)
    payment: PaymentSettings = field(default_factory=PaymentSettings)
    pricing: PricingSettings = field(default_factory=PricingSettings)
    mail: MailSettings = field(default_factory=MailSettings)
    ledger: LedgerSettings = field(default_factory=LedgerSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_bool(value: str) -> bool:
    """Parse a string value to boolean."""
    return value.strip().lower() in ("true", "yes", "1", "on", "enabled")


def _load_from_ini(parser: configparser.ConfigParser, cfg: Settings) -> None:
    """Load configuration from a parsed INI file into Settings."""
    if parser.has_section("server"):
        cfg.server.host = parser.get("server", "host", fallback=cfg.server.host)
        cfg.server.port = parser.getint("server", "port", fallback=cfg.server.port)
        cfg.server.static_dir = parser.get(
            "server", "static_dir", fallback=cfg.server.static_dir
        )

    if parser.has_section("payment"):
        cfg.payment.recipient_handle = parser.get(
            "payment", "recipient_handle", fallback=cfg.payment.recipient_handle
        )
        cfg.payment.base_url = parser.get(
            "payment", "base_url", fallback=cfg.payment.base_url
        )

    if parser.has_section("pricing"):
        cfg.pricing.price_per_player_line = parser.getint(
            "pricing", "price_per_player_line", fallback=cfg.pricing.price_per_player_line
        )
        cfg.pricing.price_per_business_line = parser.getint(
            "pricing",
            "price_per_business_line",
            fallback=cfg.pricing.price_per_business_line,
        )

    if parser.has_section("mail"):
        mail = cfg.mail
        mail.host = parser.get("mail", "host", fallback=mail.host)
        mail.port = parser.getint("mail", "port", fallback=mail.port)
        mail.user = parser.get("mail", "user", fallback=mail.user)
        mail.password = parser.get("mail", "password", fallback=mail.password)
        if parser.has_option("mail", "use_tls"):
            mail.use_tls = _parse_bool(parser.get("mail", "use_tls"))
        mail.timeout_seconds = parser.getfloat(
            "mail", "timeout_seconds", fallback=mail.timeout_seconds
        )
        mail.sender = parser.get("mail", "sender", fallback=mail.sender)
        mail.operator_address = parser.get(
            "mail", "operator_address", fallback=mail.operator_address
        )
        mail.sales_address = parser.get(
            "mail", "sales_address", fallback=mail.sales_address
        )

    if parser.has_section("ledger"):
        cfg.ledger.path = parser.get("ledger", "path", fallback=cfg.ledger.path)

    if parser.has_section("logging"):
        cfg.logging.level = parser.get(
            "logging", "level", fallback=cfg.logging.level
        ).upper()


def _apply_env_overrides(cfg: Settings) -> None:
    """Apply environment variable overrides to configuration."""
    if env_host := os.getenv("FUNDRAISER_HOST"):
        cfg.server.host = env_host
    if env_port := os.getenv("PORT") or os.getenv("FUNDRAISER_PORT"):
        cfg.server.port = int(env_port)
    if env_static := os.getenv("FUNDRAISER_STATIC_DIR"):
        cfg.server.static_dir = env_static

    if env_handle := os.getenv("FUNDRAISER_RECIPIENT_HANDLE"):
        cfg.payment.recipient_handle = env_handle
    if env_base := os.getenv("FUNDRAISER_PAYMENT_BASE_URL"):
        cfg.payment.base_url = env_base

    if env_player := os.getenv("FUNDRAISER_PRICE_PER_PLAYER_LINE"):
        cfg.pricing.price_per_player_line = int(env_player)
    if env_business := os.getenv("FUNDRAISER_PRICE_PER_BUSINESS_LINE"):
        cfg.pricing.price_per_business_line = int(env_business)

    if env_smtp_host := os.getenv("FUNDRAISER_SMTP_HOST"):
        cfg.mail.host = env_smtp_host
    if env_smtp_port := os.getenv("FUNDRAISER_SMTP_PORT"):
        cfg.mail.port = int(env_smtp_port)
    if env_user := os.getenv("EMAIL_USER"):
        cfg.mail.user = env_user
    if env_pass := os.getenv("EMAIL_PASS"):
        cfg.mail.password = env_pass
    if env_tls := os.getenv("FUNDRAISER_SMTP_TLS"):
        cfg.mail.use_tls = _parse_bool(env_tls)
    if env_timeout := os.getenv("FUNDRAISER_SMTP_TIMEOUT"):
        cfg.mail.timeout_seconds = float(env_timeout)
    if env_sender := os.getenv("FUNDRAISER_MAIL_SENDER"):
        cfg.mail.sender = env_sender
    if env_operator := os.getenv("FUNDRAISER_OPERATOR_ADDRESS"):
        cfg.mail.operator_address = env_operator
    if env_sales := os.getenv("FUNDRAISER_SALES_ADDRESS"):
        cfg.mail.sales_address = env_sales

    if env_ledger := os.getenv("FUNDRAISER_LEDGER_PATH"):
        cfg.ledger.path = env_ledger

    if env_log := os.getenv("FUNDRAISER_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_settings(config_file: Path | None = None) -> Settings:
    """
    Load configuration from all sources with proper priority.

    Args:
        config_file: INI file to read.  Defaults to FUNDRAISER_CONFIG, then
            config/fundraiser.ini under the project root.  A missing file
            is not an error.

    Returns:
        Settings: Fully populated configuration object.
    """
    cfg = Settings()

    if config_file is None:
        env_file = os.getenv("FUNDRAISER_CONFIG")
        config_file = Path(env_file) if env_file else CONFIG_FILE

    if config_file.exists():
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    _apply_env_overrides(cfg)

    return cfg
