from flask import Flask
from pagamento_pix.config import Config
from pagamento_pix.routes.pix import pix_bp
from pagamento_pix.error import register_erro_handlers
from pagamento_pix.limiter import limiter


def create_app(config=None):
    app = Flask('pagamento_pix')
    app.config.from_object(Config)

    if config:
        app.config.update(config)

    limiter.init_app(app)

    app.register_blueprint(pix_bp, url_prefix='/pix')

    register_erro_handlers(app)

    return app
