from certumctl.app.commands import info, keys, wipe

COMMAND_MODULES = [info, keys, wipe]
