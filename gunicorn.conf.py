import os
import sys

# Add src directory to Python path so 'judgment_search' can be found without an install
sys.path.append(os.path.join(os.getcwd(), 'src'))

wsgi_app = "judgment_search.api.server:app"
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Rasterizing scanned judgments is memory hungry; keep workers few and threaded.
workers = int(os.environ.get('GUNICORN_WORKERS', '1'))
threads = int(os.environ.get('GUNICORN_THREADS', '4'))
worker_class = "gthread"
worker_tmp_dir = "/dev/shm"

preload_app = False
accesslog = "-"
errorlog = "-"
loglevel = "info"
# Upstream document downloads can be slow.
timeout = 90
