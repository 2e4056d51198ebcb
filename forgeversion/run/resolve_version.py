"""
 Resolve a Forge or NeoForge version for a Minecraft version and publish it as the "version" output
"""

import sys

from pydantic import ValidationError

from forgeversion.common import default_session
from forgeversion.common.actions import ActionsCore
from forgeversion.model import (
    ErrorKind,
    ForgeType,
    InputError,
    Resolution,
    Settings,
)
from forgeversion.resolve import resolve_forge, resolve_neoforge

RESOLVERS = {
    ForgeType.NEOFORGE.value: resolve_neoforge,
    ForgeType.FORGE.value: resolve_forge,
}


def validation_message(err: ValidationError):
    messages = []
    for e in err.errors():
        ctx_error = e.get("ctx", {}).get("error")
        messages.append(str(ctx_error) if ctx_error else "%s: %s" % (e["loc"][0], e["msg"]))
    return "; ".join(messages)


def read_settings(core: ActionsCore) -> Settings:
    forge_type = core.get_input("forge-type") or ForgeType.NEOFORGE.value
    if forge_type not in RESOLVERS:
        raise InputError("Invalid forge type '%s'" % forge_type)

    return Settings(
        mc_version=core.get_input("minecraft-version", required=True),
        forge_type=forge_type,
        channel=core.get_input("channel") or "latest",
        latest=core.get_boolean_input("latest", True),
    )


def resolve(settings: Settings, sess, core: ActionsCore) -> Resolution:
    resolver = RESOLVERS.get(settings.forge_type)
    if resolver is None:
        return Resolution.error(
            ErrorKind.CONFIGURATION, "Invalid forge type '%s'" % settings.forge_type
        )
    return resolver(settings, sess, core)


def run(core=None, sess=None) -> int:
    core = core or ActionsCore()
    try:
        try:
            settings = read_settings(core)
        except ValidationError as e:
            raise InputError(validation_message(e)) from e

        if sess is None:
            with default_session() as sess:
                result = resolve(settings, sess, core)
        else:
            result = resolve(settings, sess, core)
        if not result.is_ok:
            core.set_failed(result.failure.message)
            return core.exit_code

        version = result.version or ""
        if not version:
            core.debug(
                "No %s version found for Minecraft %s"
                % (settings.forge_type, settings.mc_version)
            )
        core.debug("Final version: %s" % version)
        core.set_output("version", version)
    except Exception as e:
        core.set_failed(str(e) or e.__class__.__name__)
    return core.exit_code


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
