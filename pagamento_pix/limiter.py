from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pagamento_pix.config import Config


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[Config.LIMITE_REQUISICOES]
)
