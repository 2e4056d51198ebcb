"""
 Pick a NeoForge version out of the maven metadata version list
"""

import json
from typing import Callable, Iterable, Optional

from ..common import neoforge_metadata_url
from ..common.http import get_text
from ..common.neoforge import BETA_MARKER
from ..model import Channel, Resolution, Settings
from ..model.neoforge import NeoForgeMavenMetadata


def _noop(message):
    pass


def normalize_mc_version(mc_version: str):
    if len(mc_version.split(".")) == 2:
        return "%s.0" % mc_version
    return mc_version


def search_key(mc_version: str):
    # NeoForge drops the leading "1." of the Minecraft version: 1.20.1 -> 20.1.x
    mc_version = normalize_mc_version(mc_version)
    return mc_version[mc_version.find(".") + 1 :]


def select_neoforge_version(
    settings: Settings,
    versions: Iterable[str],
    debug: Optional[Callable[[str], None]] = None,
) -> Optional[str]:
    """
    Versions are expected in ascending release order, the last match is taken as the newest.
    Returns None when nothing matches the Minecraft version (or, for the recommended channel
    without the latest fallback, when only betas match).
    """
    debug = debug or _noop

    mc_version = normalize_mc_version(settings.mc_version)
    debug("Minecraft Version: %s" % mc_version)

    key = search_key(mc_version)
    debug("Search version: %s" % key)

    filtered_versions = [v for v in versions if v.startswith(key)]
    debug("Possible versions: %s" % ",".join(filtered_versions))

    latest_version = filtered_versions[-1] if filtered_versions else None
    if settings.channel == Channel.LATEST.value:
        debug("Found latest version %s" % latest_version)
        return latest_version

    recommended_versions = [v for v in filtered_versions if BETA_MARKER not in v]
    recommended_version = recommended_versions[-1] if recommended_versions else None
    debug("Recommended Version: %s" % recommended_version)

    if settings.latest:
        return recommended_version or latest_version
    return recommended_version


def resolve_neoforge(settings: Settings, sess, core) -> Resolution:
    try:
        xml_text = get_text(sess, neoforge_metadata_url())
        metadata = NeoForgeMavenMetadata.parse_xml(xml_text)

        core.debug("XML Result:")
        core.debug(metadata.model_dump_json(indent=2, by_alias=True))

        core.debug("Parsed Versions:")
        core.debug(json.dumps(metadata.versions, indent=2))

        return Resolution.success(
            select_neoforge_version(settings, metadata.versions, core.debug)
        )
    except Exception as e:
        return Resolution.from_exception(e, "Failed to fetch XML data")
