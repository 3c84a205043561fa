import logging
import sys

import click
import requests

from pyhydrawise import (Hydrawise, HydrawiseCommandException,
                         HydrawiseConnectionType, __version__)

pass_binding = click.make_pass_decorator(Hydrawise)


@click.group(invoke_without_command=True)
@click.option('--host', envvar="PYHYDRAWISE_HOST", required=False,
              help='The host name or IP address of the controller to '
                   'connect to locally.')
@click.option('--user', envvar="PYHYDRAWISE_USER", default='admin',
              show_default=True,
              help='The user name of the local controller.')
@click.option('--password', envvar="PYHYDRAWISE_PASSWORD", required=False,
              help='The password of the local controller.')
@click.option('--api_key', envvar="PYHYDRAWISE_API_KEY", required=False,
              help='The API key of your Hydrawise account, used when no '
                   'host is given.')
@click.option('--timeout', envvar="PYHYDRAWISE_TIMEOUT", default=5.0,
              type=float, show_default=True,
              help='Seconds to wait for a response.')
@click.option('--debug/--normal', default=False)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, host, user, password, api_key, timeout, debug):
    """A cli tool for controlling Hydrawise sprinkler controllers,
    locally or through the Hydrawise cloud."""
    if debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if host is None and api_key is None:
        click.echo(
            "No host name or API key given, see usage below")
        click.echo(ctx.get_help())
        sys.exit(1)

    if host is not None:
        connection_type = HydrawiseConnectionType.LOCAL
    else:
        connection_type = HydrawiseConnectionType.CLOUD

    try:
        ctx.obj = Hydrawise(connection_type, host=host, user=user,
                            password=password, api_key=api_key,
                            timeout=timeout)
    except ValueError as ex:
        raise click.UsageError(str(ex))

    if ctx.invoked_subcommand is None:
        ctx.invoke(zones)


def send_command(command, *args):
    """Run a binding call, reporting API and connection errors."""
    try:
        return command(*args)
    except HydrawiseCommandException as ex:
        click.echo(click.style("Error: %s" % ex.message, fg="red"))
        sys.exit(1)
    except requests.RequestException as ex:
        click.echo(click.style("Unable to connect: %s" % ex, fg="red"))
        sys.exit(1)


@cli.command()
@pass_binding
def controllers(binding: Hydrawise):
    """List the controllers."""
    for controller in send_command(binding.get_controllers):
        print_controller_details(controller)


@cli.command()
@click.option('--controller', type=int, required=False,
              help='Only list the zones of this controller id.')
@pass_binding
def zones(binding: Hydrawise, controller=None):
    """List the configured zones and their state."""
    for zone in send_command(binding.get_zones, controller):
        print_zone_details(zone)


@cli.command()
@click.argument('zone', type=int)
@click.option('--duration', type=int, required=False,
              help='Number of seconds to run.')
@pass_binding
def run(binding: Hydrawise, zone, duration):
    """Run a zone (relay number locally, relay id in the cloud)."""
    print_result(send_command(binding.run_zone, zone, duration))


@cli.command()
@click.argument('zone', type=int)
@click.option('--duration', type=int, required=False,
              help='Number of seconds to suspend.')
@pass_binding
def suspend(binding: Hydrawise, zone, duration):
    """Suspend a zone."""
    print_result(send_command(binding.suspend_zone, zone, duration))


@cli.command()
@click.argument('zone', type=int)
@pass_binding
def stop(binding: Hydrawise, zone):
    """Stop a zone."""
    print_result(send_command(binding.stop_zone, zone))


@cli.command()
@click.option('--controller', type=int, required=False)
@click.option('--duration', type=int, required=False,
              help='Number of seconds to run.')
@pass_binding
def runall(binding: Hydrawise, controller, duration):
    """Run all zones."""
    print_result(send_command(binding.run_all_zones, controller, duration))


@cli.command()
@click.option('--controller', type=int, required=False)
@click.option('--duration', type=int, required=False,
              help='Number of seconds to suspend.')
@pass_binding
def suspendall(binding: Hydrawise, controller, duration):
    """Suspend all zones."""
    print_result(
        send_command(binding.suspend_all_zones, controller, duration))


@cli.command()
@click.option('--controller', type=int, required=False)
@pass_binding
def stopall(binding: Hydrawise, controller):
    """Stop all zones."""
    print_result(send_command(binding.stop_all_zones, controller))


def print_controller_details(controller):
    click.echo(
        click.style("== Controller: %s (%s) ==" % (
            controller.name, controller.id), bold=True)
    )

    if controller.serial_number is not None:
        click.echo("Serial number: %s" % controller.serial_number)
    if controller.status is not None:
        click.echo("Status: %s" % controller.status)
    if controller.last_contact_with_cloud is not None:
        click.echo("Last contact: %s" % controller.last_contact_with_cloud)


def print_zone_details(zone):
    click.echo(
        click.style("== Zone %s: %s (relay id %s) ==" % (
            zone.zone, zone.name, zone.relay_id), bold=True)
    )

    click.echo("State: " + click.style(
        "RUNNING" if zone.is_running else "IDLE",
        fg="green" if zone.is_running else "red")
               )

    if zone.is_running:
        click.echo("Remaining: %ss" % zone.remaining_running_time)
    if zone.is_suspended:
        click.echo("Suspended")
    if zone.next_run_at is not None:
        click.echo("Next run: %s for %ss" % (zone.next_run_at,
                                              zone.next_run_duration))


def print_result(result):
    if isinstance(result, dict) and result.get('message'):
        click.echo(result['message'])
    else:
        click.echo("OK")


if __name__ == "__main__":
    cli()
