from typing import Optional, Dict

from pydantic import Field

from . import MetaBase


class ForgePromotions(MetaBase):
    """
    promotions_slim.json:
    {
        "homepage": "https://files.minecraftforge.net/net/minecraftforge/forge/",
        "promos": {
            "1.20.1-latest": "47.2.20",
            "1.20.1-recommended": "47.2.0"
        }
    }
    """

    homepage: Optional[str] = None
    promos: Dict[str, str] = Field({})
