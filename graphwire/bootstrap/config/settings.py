from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict,
    PydanticBaseSettingsSource,
    YamlConfigSettingsSource,
)

from graphwire.bootstrap.config.loader import get_configfile
from graphwire.core.models.config import CodecConfig, StringLengthPolicy, MAX_OBJECTS


class CodecSettings(BaseModel):
    string_policy: Annotated[
        StringLengthPolicy,
        Field(
            description=(
                "Length prefix policy for string scalars.\n"
                "'int32'        → true signed 32-bit length on both sides (default).\n"
                "'int16_compat' → same wire layout, but strings longer than 32767\n"
                "                 UTF-8 bytes are rejected. Use it when talking to\n"
                "                 peers that narrow the length to 16 bits.\n"
                "Both peers of a session must use the same policy."
            ),
            default=StringLengthPolicy.INT32
        )
    ]

    max_objects: Annotated[
        int,
        Field(
            description=(
                "Maximum number of distinct object instances per session.\n"
                "Keys are 16 bits wide and 0xFFFF denotes null, so the value\n"
                f"cannot exceed {MAX_OBJECTS}."
            ),
            default=MAX_OBJECTS,
            ge=1,
            le=MAX_OBJECTS
        )
    ]


class LoggingSettings(BaseModel):
    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Logging verbosity of the codec loggers.",
            default="INFO"
        )
    ]


class GraphwireConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GRAPHWIRE_",
        env_nested_delimiter="__",
        extra="ignore"
    )

    codec: Annotated[
        CodecSettings,
        Field(
            description=(
                "Wire codec configuration.\n"
                "Encoder and Decoder only agree on a stream when both ends\n"
                "run with the same codec section."
            ),
            default_factory=CodecSettings
        )
    ]

    logging: Annotated[
        LoggingSettings,
        Field(
            description="Logging configuration.",
            default_factory=LoggingSettings
        )
    ]

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: tuple[PydanticBaseSettingsSource, ...] = (init_settings, env_settings)
        configfile = get_configfile()
        if configfile is not None:
            sources += (YamlConfigSettingsSource(settings_cls, yaml_file=configfile),)
        return sources

    def codec_config(self) -> CodecConfig:
        return CodecConfig(
            string_policy=self.codec.string_policy,
            max_objects=self.codec.max_objects
        )
