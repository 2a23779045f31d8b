from pagamento_pix import create_app
from pagamento_pix.config import Config


def main():
    app = create_app()
    app.run(port=Config.PORTA, use_reloader=False)


if __name__ == '__main__':
    main()
