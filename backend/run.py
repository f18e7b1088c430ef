import logging

from evlab import create_app
from evlab.config import settings

app = create_app()

if __name__ == "__main__":
    logging.getLogger(__name__).info(f"Backend listening on port {settings.PORT}")
    app.run(host=settings.HOST, port=settings.PORT, debug=False, threaded=True)
