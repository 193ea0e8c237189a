from tomledit.config.format.config_format import DocumentFormat
from tomledit.config.format.toml_format import TOMLFormat

__all__ = ["DocumentFormat", "TOMLFormat"]
