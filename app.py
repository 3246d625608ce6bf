"""
Portfolio Site
==============

Ready-to-run portfolio application.

Run with:
    python app.py

Visit:
    http://localhost:5000             - Portfolio
    http://localhost:5000/api/init    - First-run seeding (admin + default content)
    http://localhost:5000/health      - Health check
"""

from portfolio_core import create_app
from portfolio_core.core.config import Config

app = create_app()


if __name__ == '__main__':
    print("\n" + "=" * 60)
    print("Portfolio Site")
    print("=" * 60)
    print(f"Homepage:        http://localhost:{Config.PORT}")
    print(f"Initialise DB:   http://localhost:{Config.PORT}/api/init")
    print(f"Health:          http://localhost:{Config.PORT}/health")
    print("=" * 60 + "\n")

    app.run(host='0.0.0.0', port=Config.PORT, debug=not Config.IS_PRODUCTION)
