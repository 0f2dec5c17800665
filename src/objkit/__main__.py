from objkit.cli.main import cli

cli()
