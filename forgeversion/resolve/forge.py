"""
 Look up a Forge version in the promotions file
"""

from typing import Callable, Dict, Optional

from pydantic import ValidationError

from ..common import forge_promotions_url
from ..common.forge import LATEST_SUFFIX
from ..common.http import get_json
from ..model import (
    Channel,
    MetadataParseError,
    Resolution,
    Settings,
    TransportError,
    VersionNotFoundError,
)
from ..model.forge import ForgePromotions


def promotion_key(mc_version: str, channel: str):
    return "%s-%s" % (mc_version, channel)


def select_forge_version(
    settings: Settings,
    promos: Dict[str, str],
    debug: Optional[Callable[[str], None]] = None,
) -> str:
    version_key = promotion_key(settings.mc_version, settings.channel)
    version = promos.get(version_key)

    if (
        not version
        and settings.channel == Channel.RECOMMENDED.value
        and settings.latest
    ):
        fallback_key = promotion_key(settings.mc_version, LATEST_SUFFIX)
        if debug:
            debug("No %s promotion, trying %s" % (version_key, fallback_key))
        version = promos.get(fallback_key)

    if not version:
        raise VersionNotFoundError(version_key)

    return version


def resolve_forge(settings: Settings, sess, core) -> Resolution:
    url = forge_promotions_url()
    try:
        try:
            promotions = ForgePromotions.model_validate(get_json(sess, url))
        except TransportError as e:
            return Resolution.error(
                e.kind, "Failed to fetch promotions from %s (status %d)" % (url, e.status)
            )
        except (ValueError, ValidationError) as e:
            raise MetadataParseError(str(e)) from e

        core.debug(
            "Found %d Forge promotions (%s)"
            % (len(promotions.promos), promotions.homepage or url)
        )
        return Resolution.success(
            select_forge_version(settings, promotions.promos, core.debug)
        )
    except Exception as e:
        return Resolution.from_exception(e, "An unexpected error occurred.")
