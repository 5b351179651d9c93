import multiprocessing
import os

bind = os.getenv("GUNICORN_BIND", "unix:/var/www/touch/touch-backend/gunicorn.sock")
workers = int(os.getenv("GUNICORN_WORKERS", multiprocessing.cpu_count() * 2 + 1))
worker_class = "sync"
worker_tmp_dir = "/dev/shm"
max_requests = 1000
max_requests_jitter = 100
# Submissions are mailed inside the request
timeout = 60
keepalive = 5

wsgi_app = "core.wsgi:application"

# Logging
accesslog = "/var/log/touch-backend/access.log"
errorlog = "/var/log/touch-backend/error.log"
loglevel = "info"
access_log_format = '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s "%(f)s" "%(a)s" %(D)s'

# Process naming
proc_name = "touch-backend"

# Server mechanics
daemon = False
pidfile = "/var/run/touch-backend/gunicorn.pid"
umask = 0o007

# Server hooks
def on_starting(server):
    """Called just before the master process is initialized."""
    server.log.info("Starting touch backend")

def when_ready(server):
    """Called just after the server is started."""
    server.log.info("Touch backend is ready. Spawning workers")

def worker_abort(worker):
    """Called when a worker receives the SIGABRT signal."""
    worker.log.info("Worker received SIGABRT signal, a submission email may have timed out")
