from forgeversion.run.resolve_version import main

main()
