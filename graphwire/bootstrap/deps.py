import json
from functools import lru_cache

from pydantic import ValidationError

from graphwire.bootstrap.config.settings import GraphwireConfig
from graphwire.core.models.config import CodecConfig


@lru_cache
def get_config() -> GraphwireConfig:
    try:
        return GraphwireConfig()
    except FileNotFoundError as ex:
        raise SystemExit(f"Provide a correct configuration file path: {ex}")
    except ValidationError as ex:
        msg = ["Configuration validation failed:"]
        errs = json.loads(ex.json())
        for err in errs:
            msg.append(f"  {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}")
        raise SystemExit("\n".join(msg))


@lru_cache
def get_codec_config() -> CodecConfig:
    return get_config().codec_config()

