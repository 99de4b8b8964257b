"""
Management command to render a chat message body to HTML.

Reads the message text from a file (or stdin) and prints the fragment the
conversation view would mount. Useful for checking how a stored answer
renders without opening the app.
"""

import sys

from django.core.management.base import BaseCommand, CommandError

from transcript.markdown.renderer import render_message


class Command(BaseCommand):
    help = 'Render a chat message body (markdown-like text) to an HTML fragment'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            nargs='?',
            default='-',
            help='File holding the message body; "-" or omitted reads stdin',
        )
        parser.add_argument(
            '--sanitize',
            action='store_true',
            help='Run the bleach allowlist pass over the output',
        )
        parser.add_argument(
            '--no-protect-code',
            action='store_true',
            help='Let heading/emphasis/list rules reach into code (legacy output)',
        )

    def handle(self, *args, **options):
        path = options.get('path')

        if path == '-':
            text = sys.stdin.read()
        else:
            try:
                with open(path, encoding='utf-8') as handle:
                    text = handle.read()
            except (OSError, UnicodeDecodeError) as e:
                raise CommandError(f'Could not read message from {path}: {e}')

        config = {}
        if options.get('sanitize'):
            config['SANITIZE_OUTPUT'] = True
        if options.get('no_protect_code'):
            config['PROTECT_CODE'] = False

        html = render_message(text, context={'config': config})
        self.stdout.write(html)
