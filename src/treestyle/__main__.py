from treestyle.cli.main import cli

cli()
