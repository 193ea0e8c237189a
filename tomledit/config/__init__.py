from tomledit.config.base import register_config
from tomledit.config.format import DocumentFormat, TOMLFormat

__all__ = ["register_config", "DocumentFormat", "TOMLFormat"]
