# -*- coding: utf-8 -*-
"""
Воркер сохранения показаний.

Запись в БД может быть медленной, поэтому store() только ставит задачу в
однопоточный executor и сразу возвращает управление. Ошибки логируются и
отбрасываются: повторов нет, каждое показание сохраняется не более одного раза.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from core.utils.error_handler import log_exception

logger = logging.getLogger("persistence_worker")


class PersistenceWorker:
    """Фоновая отправка показаний в хранилище с методом store()."""

    def __init__(self, sink, executor: Optional[ThreadPoolExecutor] = None):
        self._sink = sink
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="persistence")
        self._last_future: Optional[Future] = None
        self._closed = False

    def store(self, timestamp: str, temperature_c: float, humidity: float, pressure: float) -> Optional[Future]:
        """Ставит сохранение в очередь. Не блокирует и не выбрасывает ошибок хранилища."""
        if self._closed:
            logger.warning("⚠️ Воркер остановлен, показания на %s не сохранены", timestamp)
            return None
        future = self._executor.submit(self._store_safely, timestamp, temperature_c, humidity, pressure)
        self._last_future = future
        logger.debug("📤 Показания на %s поставлены в очередь сохранения", timestamp)
        return future

    def _store_safely(self, timestamp: str, temperature_c: float, humidity: float, pressure: float) -> bool:
        try:
            self._sink.store(timestamp, temperature_c, humidity, pressure)
            return True
        except Exception as e:
            log_exception(e, "❌ Показания не сохранены", {"time": timestamp})
            return False

    def flush(self, timeout: Optional[float] = None) -> None:
        """Ждёт завершения последней поставленной задачи (executor однопоточный)."""
        if self._last_future is not None:
            self._last_future.result(timeout=timeout)

    def shutdown(self, wait: bool = True) -> None:
        if self._closed:
            return
        self._closed = True
        self._executor.shutdown(wait=wait)
        logger.info("🛑 Воркер сохранения остановлен")
