from flask import Blueprint, current_app, jsonify
from pagamento_pix.gerador_qr_code import (DadosPix,
                                           gerar_payload_pix,
                                           gerar_qr_code_png,
                                           decodificar_payload,
                                           verificar_payload,
                                           formatar_valor)
from pagamento_pix.validation import validar_json, remover_acentos
from pagamento_pix.log import configurar_logging
from pagamento_pix.limiter import limiter
import base64
import logging


configurar_logging()
logger = logging.getLogger(__name__)


pix_bp = Blueprint('pix', __name__)


def _dados_pix(dados):
    config = current_app.config

    return DadosPix(
        chave_pix=dados.get('chave_pix', config['PIX_CHAVE']),
        nome_recebedor=remover_acentos(dados.get('nome', config['PIX_NOME'])),
        cidade_recebedor=remover_acentos(
            dados.get('cidade', config['PIX_CIDADE'])),
        valor=dados.get('valor'),
        txid=dados.get('txid')
    )


@pix_bp.route('/saude', methods=['GET'])
@limiter.exempt
def saude():
    return jsonify({'status': 'ok'}), 200


@pix_bp.route('/payload', methods=['POST'])
@limiter.limit(lambda: current_app.config['LIMITE_REQUISICOES'])
def criar_payload():
    logger.info('Gerando payload PIX...')

    dados = validar_json()
    if isinstance(dados, tuple):
        return dados

    pix = _dados_pix(dados)
    payload = gerar_payload_pix(pix)

    logger.info(f'Payload PIX gerado para txid={pix.txid}.')
    return jsonify({
        'payload': payload,
        'txid': pix.txid,
        'valor': formatar_valor(pix.valor)
    }), 201


@pix_bp.route('/qrcode', methods=['POST'])
@limiter.limit(lambda: current_app.config['LIMITE_REQUISICOES'])
def criar_qr_code():
    logger.info('Gerando QR Code PIX...')

    dados = validar_json()
    if isinstance(dados, tuple):
        return dados

    pix = _dados_pix(dados)
    payload = gerar_payload_pix(pix)
    imagem = base64.b64encode(gerar_qr_code_png(payload)).decode('ascii')

    logger.info(f'QR Code PIX gerado para txid={pix.txid}.')
    return jsonify({
        'payload': payload,
        'qr_code_base64': imagem
    }), 201


@pix_bp.route('/validar', methods=['POST'])
@limiter.limit(lambda: current_app.config['LIMITE_REQUISICOES'])
def validar_payload():
    logger.info('Validando payload PIX...')

    dados = validar_json()
    if isinstance(dados, tuple):
        return dados

    payload = dados.get('payload')
    valido = verificar_payload(payload)
    campos = dict(decodificar_payload(payload))

    if not valido:
        logger.warning('Payload PIX com CRC inválido.')
    else:
        logger.info('Payload PIX válido.')

    return jsonify({'valido': valido, 'campos': campos}), 200
