from gitgate.cli import cli

cli()
