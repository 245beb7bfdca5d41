# Gunicorn configuration for production deployments
import os
import sys

# Add src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, "src")
sys.path.insert(0, src_path)

wsgi_app = "clinicvoice.app:app"

# Server socket
bind = f"0.0.0.0:{os.environ.get('PORT', 8000)}"
backlog = 2048

# Worker processes. The clinic store lives in memory, so one worker keeps
# every request on the same data.
workers = 1
worker_class = "uvicorn.workers.UvicornWorker"
worker_connections = 1000
# TTS and signed-URL calls can take several seconds
timeout = 60
keepalive = 2

max_requests = 0

# Logging
accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("LOG_LEVEL", "info").lower()

proc_name = "clinic-voice"

preload_app = False
daemon = False
