import os

from dotenv import load_dotenv

# Local settings file; never overrides the real process environment
load_dotenv(override=False)

class Config:
    # Key-value store (host:port, same variable names the deployment already uses)
    REDIS_ADDRESS = os.environ.get('ADDRESS') or 'localhost:6379'
    REDIS_PASSWORD = os.environ.get('PASSWORD') or None
    REDIS_DB = int(os.environ.get('REDIS_DB', '0'))
    # 'redis' in deployments; 'memory' keeps everything in this process
    STORE_BACKEND = os.environ.get('STORE_BACKEND', 'redis')
    PORT = int(os.environ.get('PORT') or '8080')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # '*' or a comma-separated list of origins
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
