import signal
import sys

from django.conf import settings
from django.core.management import BaseCommand, CommandError
from django.core.servers.basehttp import get_internal_wsgi_application, run
from django.db import DatabaseError, connections

BANNER = """
Server is running!
Server Details:
   - Port: {port}
   - Environment: {environment}
   - Database: Connected
   - Email Service: Configured

Available Endpoints:
   - GET  /health         - Check server status
   - GET  /api/referrals  - List all referrals
   - POST /api/referrals  - Create new referral

Try these curl commands to test:
   curl http://localhost:{port}/health
   curl http://localhost:{port}/api/referrals
"""


class Command(BaseCommand):
    """Check the database connection, then serve the API until SIGTERM"""
    help = 'Check the database connection, then serve the API until SIGTERM'

    def add_arguments(self, parser):
        parser.add_argument('--port', type=int, default=settings.PORT)
        parser.add_argument('--host', default='0.0.0.0')

    def handle(self, *args, **options):
        try:
            connections['default'].ensure_connection()
        except DatabaseError as e:
            raise CommandError('Failed to start server: {}'.format(e))
        self.stdout.write(self.style.SUCCESS('Database connection established'))

        signal.signal(signal.SIGTERM, self.shutdown)
        self.stdout.write(BANNER.format(port=options['port'], environment=settings.NODE_ENV))
        self.stdout.flush()
        run(options['host'], options['port'], get_internal_wsgi_application(), threading=True)

    def shutdown(self, signum, frame):
        self.stdout.write('SIGTERM received. Closing HTTP server and database connection...')
        self.stdout.flush()
        connections.close_all()
        sys.exit(0)
