"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores que não dependem de ambiente; configurações por env ficam em shared/config/settings.py
"""


class API:
    """Constantes de APIs externas"""

    # Provedores de CEP
    BRASILAPI_BASE_URL = "https://brasilapi.com.br/api/cep/v2"
    VIACEP_BASE_URL = "https://viacep.com.br/ws"

    # Open-Meteo
    OPENMETEO_BASE_URL = "https://api.open-meteo.com/v1"
    OPENMETEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 8  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Retry (tenacity) - apenas 429/503 e timeouts
    HTTP_RETRY_ATTEMPTS = 3
    HTTP_RETRY_MULTIPLIER = 0.3
    HTTP_RETRY_WAIT_MIN = 0.3  # segundos
    HTTP_RETRY_WAIT_MAX = 2  # segundos
    HTTP_RETRY_STATUSES = (429, 503)


class Providers:
    """Tags de provedores gravadas nos resultados"""

    BRASILAPI = "brasilapi"
    VIACEP = "viacep"
    OPENMETEO = "open-meteo"


class Cache:
    """Constantes de cache"""

    TTL_WEATHER = 600  # 10 minutos, expiração absoluta
    PREFIX_WEATHER = "weather:"


class ZipCodeRules:
    """Regras do CEP"""

    LENGTH = 8
    STRIP_CHARS = ("-", " ")


class Forecast:
    """Limites de previsão"""

    MIN_DAYS = 1
    MAX_DAYS = 7
    DEFAULT_DAYS = 3
    MAX_CONCURRENT_LOOKUPS = 10


class App:
    """Constantes gerais da aplicação"""

    TIMEZONE = "America/Sao_Paulo"
    COUNTRY_CODE = "BR"
    GEOCODING_LANGUAGE = "pt"
    DEFAULT_ACTOR = "System"
    CORRELATION_HEADER = "X-Correlation-ID"


class BrazilianStates:
    """UF -> nome do estado (campo 'admin1' da geocodificação Open-Meteo)"""

    GEOCODING_CANDIDATES = 10

    NAMES = {
        "AC": "Acre", "AL": "Alagoas", "AP": "Amapá", "AM": "Amazonas",
        "BA": "Bahia", "CE": "Ceará", "DF": "Distrito Federal", "ES": "Espírito Santo",
        "GO": "Goiás", "MA": "Maranhão", "MT": "Mato Grosso", "MS": "Mato Grosso do Sul",
        "MG": "Minas Gerais", "PA": "Pará", "PB": "Paraíba", "PR": "Paraná",
        "PE": "Pernambuco", "PI": "Piauí", "RJ": "Rio de Janeiro", "RN": "Rio Grande do Norte",
        "RS": "Rio Grande do Sul", "RO": "Rondônia", "RR": "Roraima", "SC": "Santa Catarina",
        "SP": "São Paulo", "SE": "Sergipe", "TO": "Tocantins",
    }

    @classmethod
    def name_of(cls, uf: str) -> str:
        """Nome do estado para a UF; a própria string quando desconhecida"""
        return cls.NAMES.get((uf or "").strip().upper(), uf or "")
