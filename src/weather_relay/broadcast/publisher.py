"""Publish broadcast extras onto Kafka, the channel other applications listen on."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from confluent_kafka import Producer

from weather_relay.models import Location
from weather_relay.settings import UnitSettings, make_unit_settings_from_env
from weather_relay.sources.base import BroadcastSource
from weather_relay.utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="broadcast_publisher")

DEFAULT_BOOTSTRAP = "kafka:9092"
DEFAULT_TOPIC = "weather.broadcast"
DEFAULT_FLUSH_TIMEOUT = 10.0  # seconds


@dataclass
class PublisherConfig:
    """Runtime configuration for BroadcastPublisher."""

    bootstrap: str = DEFAULT_BOOTSTRAP
    topic: str = DEFAULT_TOPIC
    flush_timeout_sec: float = DEFAULT_FLUSH_TIMEOUT


def _delivery_report(err, msg) -> None:
    if err:
        logger.error("Delivery failed for key=%s err=%s", msg.key(), err)
    else:
        logger.debug(
            "Delivered message to %s [%s] @ %s",
            msg.topic(),
            msg.partition(),
            msg.offset(),
        )


class BroadcastPublisher:
    """
    Sends every extra of a BroadcastSource as one Kafka message.

    Messages are keyed by the source's intent action and carry the extra's
    name as a header, mirroring how a broadcast intent bundles its extras.
    """

    def __init__(self, config: PublisherConfig, producer: Optional[Any] = None) -> None:
        self.config = config
        self._producer = producer or Producer({"bootstrap.servers": config.bootstrap})

    def publish(
        self,
        source: BroadcastSource,
        locations: Sequence[Location],
        settings: UnitSettings,
    ) -> int:
        """Publish the extras for ``locations``; returns the number of messages produced."""
        extras: Dict[str, str] = source.get_extras(locations, settings)
        if not extras:
            logger.warning(f"Source {source.id} produced no extras; nothing to publish")
            return 0

        logger.info(
            f"Publishing {len(extras)} extras from '{source.id}' to topic '{self.config.topic}'"
        )
        produced = 0
        for name, value in extras.items():
            self._producer.produce(
                self.config.topic,
                value.encode("utf-8"),
                key=source.intent_action.encode("utf-8"),
                headers=[("extra", name.encode("utf-8"))],
                callback=_delivery_report,
            )
            produced += 1

        remaining = self._producer.flush(self.config.flush_timeout_sec)
        if remaining:
            logger.warning(f"{remaining} messages still queued after flush")
        logger.info(f"Produced {produced} broadcast messages")
        return produced


def make_publisher_from_env(producer: Optional[Any] = None) -> BroadcastPublisher:
    """Construct a publisher from ``KAFKA_*`` environment overrides."""
    config = PublisherConfig(
        bootstrap=os.getenv("KAFKA_BOOTSTRAP", DEFAULT_BOOTSTRAP),
        topic=os.getenv("KAFKA_TOPIC_BROADCAST", DEFAULT_TOPIC),
        flush_timeout_sec=float(os.getenv("KAFKA_FLUSH_TIMEOUT_SEC", DEFAULT_FLUSH_TIMEOUT)),
    )
    return BroadcastPublisher(config=config, producer=producer)


def main() -> None:
    """Manual helper: fetch the home location from Ilmateenistus and broadcast it."""
    from weather_relay.broadcast.service import DataShareService
    from weather_relay.sources.ilmateenistus.api import make_ilmateenistus_api_from_env
    from weather_relay.sources.ilmateenistus.service import IlmateenistusService

    setup_logging(level=os.getenv("LOG_LEVEL", "INFO"))

    location = Location(
        latitude=float(os.environ.get("HOME_LAT", "59.437")),
        longitude=float(os.environ.get("HOME_LON", "24.7536")),
        timezone=os.environ.get("HOME_TZ", "Europe/Tallinn"),
        country_code=os.environ.get("HOME_COUNTRY_CODE", "EE"),
        city=os.environ.get("HOME_CITY"),
    )
    source = IlmateenistusService(api=make_ilmateenistus_api_from_env())
    if not source.is_supported(location):
        logger.error(f"{source.name} does not cover country {location.country_code!r}")
        raise SystemExit(1)

    location.weather = source.request_weather(location)
    publisher = make_publisher_from_env()
    publisher.publish(DataShareService(), [location], make_unit_settings_from_env())


if __name__ == "__main__":
    main()
