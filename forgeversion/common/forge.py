FORGE_PROMOTIONS_URL = (
    "https://files.minecraftforge.net/net/minecraftforge/forge/promotions_slim.json"
)

# promos keys look like "1.20.1-recommended"
LATEST_SUFFIX = "latest"
