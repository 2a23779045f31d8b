from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from io import BytesIO
import re
import crcmod
import qrcode


GUI_PIX = 'BR.GOV.BCB.PIX'
CODIGO_MOEDA_BRL = '986'
CODIGO_PAIS = 'BR'
MCC_NAO_CLASSIFICADO = '0000'
INICIACAO_ESTATICA = '11'

MAX_NOME = 25
MAX_CIDADE = 15
MAX_TAMANHO_CAMPO = 99

CAMPO_CRC = '6304'

_crc16_ccitt_false = crcmod.mkCrcFun(
    0x11021, initCrc=0xFFFF, rev=False, xorOut=0x0000)

_FORA_DO_ASCII = re.compile(r'[^\x20-\x7E]')


class ErroValidacao(ValueError):
    '''
    Dado de entrada que geraria um payload PIX corrompido.
    '''
    def __init__(self, campo: str, mensagem: str):
        self.campo = campo
        self.mensagem = mensagem
        super().__init__(f'{campo}: {mensagem}')


@dataclass(frozen=True)
class DadosPix:
    chave_pix: str
    nome_recebedor: str
    cidade_recebedor: str
    valor: Decimal
    txid: str


def _sanitizar(valor: str) -> str:
    return valor.replace('\n', ' ').replace('\r', ' ').strip()


def _emv(id_, valor, campo=None):
    valor = _sanitizar(valor)
    campo = campo or id_

    if _FORA_DO_ASCII.search(valor):
        raise ErroValidacao(campo, 'Contém caracteres fora do ASCII imprimível.')

    if len(valor) > MAX_TAMANHO_CAMPO:
        raise ErroValidacao(
            campo, f'Valor com {len(valor)} caracteres excede o limite de '
                   f'{MAX_TAMANHO_CAMPO}.')

    tamanho = f'{len(valor):02d}'
    return f'{id_}{tamanho}{valor}'


def formatar_valor(valor) -> str:
    '''
    Formata o valor em reais com duas casas decimais (arredondamento
    meio para cima: 9.999 -> "10.00").
    '''
    if isinstance(valor, bool):
        raise ErroValidacao('valor', 'Valor deve ser numérico.')

    try:
        decimal = Decimal(str(valor).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise ErroValidacao('valor', 'Valor deve ser numérico.')

    if not decimal.is_finite():
        raise ErroValidacao('valor', 'Valor deve ser finito.')

    try:
        decimal = decimal.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ErroValidacao('valor', 'Valor grande demais.')

    if decimal <= 0:
        raise ErroValidacao('valor', 'Valor deve ser maior que zero.')

    return f'{decimal:.2f}'


def montar_payload(dados: DadosPix) -> str:
    '''
    Monta o payload BR Code estático, terminando no literal "6304"
    que aguarda o CRC.
    '''
    conta = (
        _emv('00', GUI_PIX) +
        _emv('01', dados.chave_pix, 'chave_pix')
    )
    dados_adicionais = _emv('05', dados.txid, 'txid')

    return (
        _emv('00', '01') +
        _emv('01', INICIACAO_ESTATICA) +
        _emv('26', conta, 'chave_pix') +
        _emv('52', MCC_NAO_CLASSIFICADO) +
        _emv('53', CODIGO_MOEDA_BRL) +
        _emv('54', formatar_valor(dados.valor), 'valor') +
        _emv('58', CODIGO_PAIS) +
        _emv('59', _sanitizar(dados.nome_recebedor)[:MAX_NOME],
             'nome_recebedor') +
        _emv('60', _sanitizar(dados.cidade_recebedor)[:MAX_CIDADE],
             'cidade_recebedor') +
        _emv('62', dados_adicionais, 'txid') +
        CAMPO_CRC
    )


def calcular_crc16(payload: str) -> str:
    # CRC-16/CCITT-FALSE, um byte por caractere
    try:
        dados = payload.encode('latin-1')
    except UnicodeEncodeError:
        raise ErroValidacao(
            'payload', 'Contém caracteres acima de U+00FF.')

    crc = _crc16_ccitt_false(dados)
    return f'{crc:04X}'


def _validar_texto(campo, valor):
    if not isinstance(valor, str):
        raise ErroValidacao(campo, 'Deve ser texto.')

    if not _sanitizar(valor):
        raise ErroValidacao(campo, 'Campo obrigatório.')


def gerar_payload_pix(dados: DadosPix = None, **campos) -> str:
    '''
    Gera payload PIX Cópia e Cola conforme padrão BACEN (EMV-Co).

    Aceita um DadosPix ou os campos nomeados: chave_pix, nome_recebedor,
    cidade_recebedor, valor e txid.
    '''
    if dados is not None and campos:
        raise ErroValidacao(
            'dados', 'Informe um DadosPix ou os campos nomeados, não ambos.')

    if dados is None:
        try:
            dados = DadosPix(**campos)
        except TypeError as erro:
            raise ErroValidacao('dados', str(erro))

    _validar_texto('chave_pix', dados.chave_pix)
    _validar_texto('nome_recebedor', dados.nome_recebedor)
    _validar_texto('cidade_recebedor', dados.cidade_recebedor)
    _validar_texto('txid', dados.txid)

    payload = montar_payload(dados)
    return payload + calcular_crc16(payload)


def decodificar_payload(payload: str) -> list:
    '''
    Percorre os campos TLV de primeiro nível e devolve uma lista de
    (id, valor). O payload precisa ser consumido por inteiro.
    '''
    if not isinstance(payload, str) or not payload:
        raise ErroValidacao('payload', 'Payload vazio.')

    if _FORA_DO_ASCII.search(payload):
        raise ErroValidacao(
            'payload', 'Contém caracteres fora do ASCII imprimível.')

    campos = []
    posicao = 0
    total = len(payload)

    while posicao < total:
        cabecalho = payload[posicao:posicao + 4]
        if len(cabecalho) < 4 or not cabecalho.isdigit():
            raise ErroValidacao(
                'payload', f'Cabeçalho TLV inválido na posição {posicao}.')

        inicio = posicao + 4
        fim = inicio + int(cabecalho[2:])
        if fim > total:
            raise ErroValidacao(
                'payload', f'Campo {cabecalho[:2]} ultrapassa o fim do payload.')

        campos.append((cabecalho[:2], payload[inicio:fim]))
        posicao = fim

    return campos


def verificar_payload(payload: str) -> bool:
    campos = decodificar_payload(payload)

    id_, valor = campos[-1]
    if id_ != '63' or len(valor) != 4:
        return False

    return calcular_crc16(payload[:-4]) == valor


def gerar_qr_code_png(payload: str, box_size=10, borda=2) -> bytes:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=borda,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    imagem = qr.make_image(fill_color='black', back_color='white')

    buffer = BytesIO()
    imagem.save(buffer, format='PNG')
    return buffer.getvalue()
