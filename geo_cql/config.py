from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class DefaultConfiguration(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GEO_CQL_")

    # Logging Configuration
    log_level: str = Field(default="WARNING")

    # WKT Configuration
    wkt_trim: bool = Field(default=True)
    wkt_rounding_precision: int = Field(default=-1)

    # URL Configuration
    # Characters `quote` leaves alone on top of "-_.~", matching encodeURIComponent
    url_safe_characters: str = Field(default="!*'()")

    def __init__(self, **values):
        super().__init__(**values)
        self.log_level = self.log_level.upper()


Configuration = DefaultConfiguration()
