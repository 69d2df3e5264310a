from routesitemap.cli import cli

cli()
