import os
import atexit
import logging
from datetime import datetime, timezone

import httpx
from flask import Flask, render_template, jsonify

from shared.utils.logger import setup_logging
from services.frontend_service.config import get_frontend_config
from services.frontend_service.hello_client import HelloServiceClient
from services.frontend_service.state import HelloView

# Configure logging
setup_logging(log_level=os.getenv('LOG_LEVEL', 'INFO'))
logger = logging.getLogger(__name__)

app = Flask(__name__)

config = get_frontend_config()
app.config['ENV'] = config.environment
app.config['DEBUG'] = config.debug

# Shared client, created once per process
hello_client = HelloServiceClient.from_config(config)
atexit.register(hello_client.close)

# =====================
# CONFIGURATION ENDPOINT
# =====================

@app.route('/api/config')
def get_config():
    """Runtime configuration for the hello page"""
    return jsonify({
        'HELLO_SERVICE_URL': config.hello_service_url,
        'ENVIRONMENT': config.environment,
        'VERSION': config.service_version
    })

@app.route('/health')
def health():
    """Health check endpoint"""
    return {
        'status': 'healthy',
        'service': 'frontend-service',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'version': config.service_version
    }

# =====================
# HELLO CHAIN
# =====================

@app.route('/api/hello')
def api_hello():
    """Proxy one hello attempt to the hello service"""
    view = HelloView()
    status = 200
    try:
        view.succeed(hello_client.fetch_hello())
    except httpx.HTTPStatusError as e:
        upstream_status = e.response.status_code
        logger.warning(f"Hello service returned {upstream_status}")
        view.fail(f"Hello service returned {upstream_status}")
        status = upstream_status if 400 <= upstream_status <= 599 else 502
    except httpx.RequestError as e:
        logger.error(f"Error fetching from hello service: {e}")
        view.fail("Failed to fetch from hello service")
        status = 500

    return jsonify(view.to_result().model_dump(mode='json')), status

# =====================
# PAGES
# =====================

@app.route('/')
def index():
    return render_template('index.html')

@app.route('/hello')
def hello_page():
    """Hello page, rendered loading; the page script resolves the attempt"""
    return render_template('hello.html', view=HelloView())

if __name__ == '__main__':
    config.log_config()
    app.run(host='0.0.0.0', port=config.port, debug=config.debug)
