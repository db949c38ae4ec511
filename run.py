#!/usr/bin/env python3
"""
Array Data Processor - Server Runner

MVC Architecture:
- Models: classification core and schemas (app/models/)
- Views: Flask routes (app/views/)
- Controllers: request orchestration (app/controllers/)

Usage:
    python run.py              # Start the API server
    python run.py --port 5000  # Custom port
    python run.py --debug      # Debug mode
"""
import argparse
import logging
import signal
import sys

from dotenv import load_dotenv

load_dotenv()

from config import get_settings  # noqa: E402


def setup_logging(level: str = "INFO", debug: bool = False):
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)


def install_shutdown_handlers(logger):
    """Exit cleanly on SIGTERM/SIGINT."""
    def _shutdown(signum, _frame):
        logger.info(f"{signal.Signals(signum).name} received. Shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGTERM, _shutdown)
    signal.signal(signal.SIGINT, _shutdown)


def main(argv=None):
    """Main entry point."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description='Array Data Processor API',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python run.py                    # Start server on port 3001
    python run.py --port 5000        # Start on port 5000
    python run.py --debug            # Enable debug mode
    python run.py --host 127.0.0.1   # Localhost only
        """
    )

    parser.add_argument(
        '--host',
        default=settings.host,
        help=f'Host to bind to (default: {settings.host})'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=settings.port,
        help=f'Port to listen on (default: {settings.port})'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        default=settings.debug,
        help='Enable debug mode'
    )

    args = parser.parse_args(argv)

    logger = setup_logging(settings.log_level, args.debug)
    install_shutdown_handlers(logger)

    from app.controllers import ProcessingController
    from app.views import create_app

    controller = ProcessingController(settings)
    app = create_app(controller)

    logger.info(f"🚀 {settings.app_name} running on port {args.port}")
    logger.info(f"📍 Local: http://localhost:{args.port}")
    logger.info(f"🔍 Health check: http://localhost:{args.port}/health")
    logger.info(f"📝 API docs: http://localhost:{args.port}/")

    app.run(
        host=args.host,
        port=args.port,
        debug=args.debug
    )


if __name__ == '__main__':
    main()
