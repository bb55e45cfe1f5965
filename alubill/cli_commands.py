"""
Flask CLI commands for working with bills and document series.

Commands:
- flask next-number: Print the next number in a document series
- flask bill-summary: Print totals for a JSON file of line items
"""

import json
import click

from alubill.services.bill_calculator import summarize
from alubill.services.document_number_service import next_number, DEFAULT_DIGITS
from alubill.utils.formatters import money_pk


def init_cli_commands(app):
    """Register CLI commands with Flask app."""

    @app.cli.command('next-number')
    @click.argument('prefix')
    @click.argument('existing', nargs=-1)
    @click.option('--digits', default=None, type=click.IntRange(min=1), help='Zero padding width')
    def next_number_command(prefix, existing, digits):
        """Print the next PREFIX-NNNN number after the EXISTING ones."""
        if digits is None:
            digits = app.config.get('DOCUMENT_NUMBER_DIGITS', DEFAULT_DIGITS)
        click.echo(next_number(prefix, list(existing), digits))

    @app.cli.command('bill-summary')
    @click.argument('path', type=click.File('r', encoding='utf-8'))
    def bill_summary_command(path):
        """Print totals for a JSON list of line items (or {"items": [...]})."""
        try:
            data = json.load(path)
        except json.JSONDecodeError as e:
            raise click.ClickException(f'Invalid JSON: {e}')

        items = data.get('items') if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise click.ClickException('Expected a list of line items.')

        result = summarize(items)
        currency = app.config.get('CURRENCY_CODE', 'PKR')

        click.echo(f'Items:     {result.item_count}')
        click.echo(f'Subtotal:  {money_pk(result.subtotal, currency)}')
        click.echo(f'Discount:  {money_pk(result.total_discount_amount, currency)}')
        click.echo(click.style(f'Net total: {money_pk(result.total_net_amount, currency)}', bold=True))
