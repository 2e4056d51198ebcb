import os

import requests

from .forge import FORGE_PROMOTIONS_URL
from .neoforge import NEOFORGE_METADATA_URL

USER_AGENT = "ForgeVersion/1.0"


def neoforge_metadata_url():
    if "FORGE_VERSION_NEOFORGE_URL" in os.environ:
        return os.environ["FORGE_VERSION_NEOFORGE_URL"]
    return NEOFORGE_METADATA_URL


def forge_promotions_url():
    if "FORGE_VERSION_FORGE_URL" in os.environ:
        return os.environ["FORGE_VERSION_FORGE_URL"]
    return FORGE_PROMOTIONS_URL


def input_env_name(name: str):
    return "INPUT_%s" % name.replace(" ", "_").upper()


def default_session():
    sess = requests.Session()

    sess.headers.update({"User-Agent": USER_AGENT})

    return sess
