import os


class Config:
    PIX_CHAVE = os.environ.get('PIX_CHAVE', '')
    PIX_NOME = os.environ.get('PIX_NOME', 'Elatho Semijoias')
    PIX_CIDADE = os.environ.get('PIX_CIDADE', 'Sao Paulo')

    LOG_DIR = os.environ.get('LOG_DIR', 'logs')
    LIMITE_REQUISICOES = os.environ.get('LIMITE_REQUISICOES', '100 per hour')
    PORTA = int(os.environ.get('PORTA', 5004))
