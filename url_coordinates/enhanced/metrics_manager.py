"""
Метрики этапов обработки параметра showCoord
"""

import time
import asyncio
from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Any, Optional


@dataclass
class StageMetrics:
    """Метрики отдельного этапа (decode, view, transform)"""
    count: int = 0
    total_time: float = 0.0
    max_time: float = 0.0
    errors: int = 0
    error_kinds: Counter = field(default_factory=Counter)
    last_error: Optional[str] = None
    last_error_time: Optional[datetime] = None

    def record_operation(self, duration: float) -> None:
        self.count += 1
        self.total_time += duration
        self.max_time = max(self.max_time, duration)

    def record_error(self, kind: str) -> None:
        self.errors += 1
        self.error_kinds[kind] += 1
        self.last_error = kind
        self.last_error_time = datetime.now()

    def get_stats(self) -> Dict[str, Any]:
        stats = {
            'count': self.count,
            'errors': self.errors,
            'error_kinds': dict(self.error_kinds),
            'last_error': self.last_error,
            'last_error_time': self.last_error_time,
        }
        if self.count:
            stats['avg_time'] = self.total_time / self.count
            stats['max_time'] = self.max_time
        return stats


class MetricsManager:
    """Менеджер метрик обработчика"""

    def __init__(self):
        self._metrics: Dict[str, StageMetrics] = defaultdict(StageMetrics)
        self._lock: Optional[asyncio.Lock] = None

    @property
    def lock(self) -> asyncio.Lock:
        """Блокировка создается при первом использовании внутри работающего цикла событий"""
        if self._lock is None:
            self._lock = asyncio.Lock()
        return self._lock

    def start_operation(self, operation_name: str) -> float:
        """
        Начало отсчета времени операции

        Args:
            operation_name: Имя операции

        Returns:
            float: Время начала операции
        """
        return time.monotonic()

    async def record_operation(self, operation_name: str, start_time: float) -> None:
        """
        Запись успешно завершенной операции

        Args:
            operation_name: Имя операции
            start_time: Время начала, полученное из start_operation
        """
        duration = time.monotonic() - start_time
        async with self.lock:
            self._metrics[operation_name].record_operation(duration)

    async def record_error(self, operation_name: str, kind: str) -> None:
        """
        Запись ошибки операции

        Args:
            operation_name: Имя операции
            kind: Вид ошибки (имя класса исключения)
        """
        async with self.lock:
            self._metrics[operation_name].record_error(kind)

    def get_stats(self) -> Dict[str, Dict[str, Any]]:
        """Статистика по всем операциям"""
        return {
            name: metrics.get_stats()
            for name, metrics in self._metrics.items()
        }

    def reset(self) -> None:
        """Сброс всех метрик"""
        self._metrics.clear()
