from flask import jsonify, request
from flask_limiter.errors import RateLimitExceeded
from pagamento_pix.gerador_qr_code import ErroValidacao
from pagamento_pix.log import configurar_logging
import logging


configurar_logging()
logger = logging.getLogger(__name__)


def register_erro_handlers(app):
    @app.errorhandler(ErroValidacao)
    def dados_pix_invalidos(erro):
        logger.warning(f'Dado inválido para o PIX: {str(erro)}')
        return jsonify({
            'erro': erro.mensagem,
            'campo': erro.campo
        }), 422

    @app.errorhandler(404)
    def rota_pix_nao_encontrada(erro):
        logger.warning(f'Rota do serviço PIX não encontrada: {str(erro)}')
        return jsonify({'erro': 'Rota do serviço PIX não encontrada!'}), 404

    @app.errorhandler(RateLimitExceeded)
    def rate_limit_handler(e):
        logger.warning(
            f"RATE LIMIT excedido | IP={request.remote_addr} | rota={request.path}"
        )
        return jsonify({
            'erro': 'Muitas requisições ao serviço PIX. Tente novamente mais tarde.'
        }), 429

    @app.errorhandler(400)
    def requisicao_pix_invalida(erro):
        logger.warning(f'Requisição PIX inválida: {str(erro)}')
        return jsonify({'erro': 'Requisição PIX inválida!'}), 400

    @app.errorhandler(405)
    def metodo_errado(erro):
        logger.warning(f'Método HTTP não permitido no serviço PIX: {str(erro)}')
        return jsonify({'erro': 'Método HTTP não permitido no serviço PIX!'}), 405

    @app.errorhandler(Exception)
    def erro_interno_pix(erro):
        logger.error(f'Erro inesperado no serviço PIX: {str(erro)}')
        return jsonify({'erro': 'Erro inesperado no serviço PIX!'}), 500
