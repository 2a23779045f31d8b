import pytest
from pagamento_pix import create_app


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'RATELIMIT_ENABLED': False,
        'PIX_CHAVE': '11999999999',
        'PIX_NOME': 'Loja Exemplo',
        'PIX_CIDADE': 'Sao Paulo'
    })
    return app


@pytest.fixture
def client(app):
    with app.app_context():
        with app.test_client() as client:
            yield client


@pytest.fixture
def dados_exemplo():
    return {
        'chave_pix': '11999999999',
        'nome_recebedor': 'Loja Exemplo',
        'cidade_recebedor': 'Sao Paulo',
        'valor': 10,
        'txid': 'ABC123'
    }
