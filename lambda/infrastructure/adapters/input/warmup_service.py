"""
Warm-up: pré-carrega singletons (providers, store, cache, sessão HTTP) e responde
pings agendados (EventBridge) sem passar pelo roteamento da API.
"""
import json
from typing import Any, Callable, List, Optional

from ddtrace import tracer

from shared.config import settings

WARMUP_BODY = {"ok": True, "warmup": True}


class WarmupService:
    def __init__(
        self,
        *,
        logger,
        get_or_create_event_loop: Callable[[], Any],
        run_async: Callable[[Any], Any],
        get_cep_provider_factory: Callable[[], Any],
        get_weather_provider_factory: Callable[[], Any],
        get_repository: Callable[[], Any],
        get_cache: Callable[[], Any],
    ):
        self.logger = logger
        self.get_or_create_event_loop = get_or_create_event_loop
        self.run_async = run_async
        self.get_cep_provider_factory = get_cep_provider_factory
        self.get_weather_provider_factory = get_weather_provider_factory
        self.get_repository = get_repository
        self.get_cache = get_cache

    @staticmethod
    def is_warmup_event(event: Any) -> bool:
        """Ping manual ({"warmup": true}) ou regra agendada do EventBridge"""
        if not isinstance(event, dict):
            return False
        return bool(event.get("warmup")) or event.get("source") == "aws.events"

    def _load_providers(self) -> List[Any]:
        cep_factory = self.get_cep_provider_factory()
        weather_factory = self.get_weather_provider_factory()
        return [
            cep_factory.get_primary_provider(),
            cep_factory.get_fallback_provider(),
            weather_factory.get_weather_provider(),
        ]

    @staticmethod
    async def _open_sessions(providers: List[Any]) -> int:
        # Providers compartilham o mesmo AiohttpSessionManager; abre uma vez por gerenciador
        seen = set()
        for provider in providers:
            session_manager = getattr(provider, "session_manager", None)
            if session_manager is None or id(session_manager) in seen:
                continue
            seen.add(id(session_manager))
            await session_manager.get_session()
        return len(seen)

    @tracer.wrap(resource="warmup.init")
    def warmup_init(self):
        """Prepara dependências para reuso em warm starts (best-effort)."""
        try:
            self.get_or_create_event_loop()
            providers = self._load_providers()
            self.get_repository()
            self.get_cache()
        except Exception as exc:  # pragma: no cover - best-effort
            self.logger.warning("Warm-up: falha ao carregar singletons", error=str(exc))
            return

        try:
            sessions = self.run_async(self._open_sessions(providers))
            self.logger.info("Warm-up concluído", providers=len(providers), http_sessions=sessions)
        except Exception as exc:  # pragma: no cover - best-effort
            self.logger.warning("Warm-up: falha ao abrir sessão HTTP", error=str(exc))

    @tracer.wrap(resource="warmup.handle_ping")
    def handle_warmup_ping(self, event: Optional[dict]):
        """
        Retorna resposta 200 para pings de warm-up; None para requisições normais.
        """
        if not self.is_warmup_event(event):
            return None

        self.logger.info("Warm-up ping recebido", source=event.get("source", "manual"))
        self.warmup_init()
        return {
            "statusCode": 200,
            "headers": {
                "Content-Type": "application/json",
                "Access-Control-Allow-Origin": settings.CORS_ORIGIN,
            },
            "body": json.dumps(WARMUP_BODY)
        }
