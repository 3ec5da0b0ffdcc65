import click

from k8sconfig.cli.sources import sources


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """k8sconfig CLI"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(sources)


if __name__ == "__main__":
    cli()
