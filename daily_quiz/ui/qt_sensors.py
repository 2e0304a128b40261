"""Qt bindings for the sensor capabilities used by the hint challenges."""

from __future__ import annotations

import logging

from PySide6.QtCore import QCoreApplication, QMicrophonePermission, QObject, Qt, QTimer
from PySide6.QtMultimedia import QAudioFormat, QAudioSource, QMediaDevices
from PySide6.QtSensors import QAccelerometer

from daily_quiz.core.audio_levels import SampleEncoding, block_to_dbfs
from daily_quiz.core.sensor_sampler import (
    MeteringCallback,
    MicrophoneUnavailableError,
    MotionCallback,
    SensorHandle,
    TouchCallback,
)
from daily_quiz.ui.components.swipe_pad import SwipePad

logger = logging.getLogger(__name__)

STANDARD_GRAVITY = 9.80665

_ENCODINGS = {
    QAudioFormat.SampleFormat.UInt8: SampleEncoding.UINT8,
    QAudioFormat.SampleFormat.Int16: SampleEncoding.INT16,
    QAudioFormat.SampleFormat.Int32: SampleEncoding.INT32,
    QAudioFormat.SampleFormat.Float: SampleEncoding.FLOAT32,
}


class _MotionHandle:
    def __init__(self, sensor: QAccelerometer) -> None:
        self._sensor = sensor

    def release(self) -> None:
        if self._sensor is None:
            return
        self._sensor.stop()
        self._sensor.readingChanged.disconnect()
        self._sensor.deleteLater()
        self._sensor = None


class _TouchHandle:
    def __init__(self, pad: SwipePad) -> None:
        self._pad = pad

    def release(self) -> None:
        if self._pad is None:
            return
        self._pad.clear_handlers()
        self._pad = None


class _RecordingHandle:
    def __init__(self, source: QAudioSource, timer: QTimer) -> None:
        self._source = source
        self._timer = timer

    def release(self) -> None:
        if self._source is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._source.stop()
        self._source.deleteLater()
        self._source = None


class QtSensorCapabilities(QObject):
    """Accelerometer, swipe pad and microphone access for the hint challenges."""

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._swipe_pad: SwipePad | None = None

    def attach_swipe_pad(self, pad: SwipePad) -> None:
        self._swipe_pad = pad

    def subscribe_motion(self, interval_ms: int, callback: MotionCallback) -> SensorHandle:
        sensor = QAccelerometer(self)
        sensor.setDataRate(max(1, round(1000 / interval_ms)))

        def _forward() -> None:
            reading = sensor.reading()
            if reading is None:
                return
            # Qt reports m/s^2; the shake threshold is expressed in g.
            callback(
                reading.x() / STANDARD_GRAVITY,
                reading.y() / STANDARD_GRAVITY,
                reading.z() / STANDARD_GRAVITY,
            )

        sensor.readingChanged.connect(_forward)
        if not sensor.start():
            logger.warning("No accelerometer available; shake hint will not register motion.")
        return _MotionHandle(sensor)

    def subscribe_touch_gesture(self, on_start: TouchCallback, on_move: TouchCallback) -> SensorHandle:
        if self._swipe_pad is None:
            raise RuntimeError("No swipe pad attached.")
        self._swipe_pad.set_handlers(on_start, on_move)
        return _TouchHandle(self._swipe_pad)

    def start_recording(self, interval_ms: int, on_metering: MeteringCallback) -> SensorHandle:
        self._ensure_microphone_permission()
        device = QMediaDevices.defaultAudioInput()
        if device.isNull():
            raise MicrophoneUnavailableError("No microphone was found.")

        audio_format = QAudioFormat()
        audio_format.setSampleRate(16000)
        audio_format.setChannelCount(1)
        audio_format.setSampleFormat(QAudioFormat.SampleFormat.Int16)
        if not device.isFormatSupported(audio_format):
            audio_format = device.preferredFormat()
        encoding = _ENCODINGS.get(audio_format.sampleFormat())
        if encoding is None:
            raise MicrophoneUnavailableError(
                f"The microphone's sample format ({audio_format.sampleFormat().name}) is not supported."
            )
        logger.debug("Recording %s at %d Hz", encoding.name, audio_format.sampleRate())

        source = QAudioSource(device, audio_format, self)
        stream = source.start()
        if stream is None:
            source.deleteLater()
            raise MicrophoneUnavailableError("The microphone could not be opened.")

        def _poll() -> None:
            data = bytes(stream.readAll().data())
            if data:
                on_metering(block_to_dbfs(data, encoding))

        timer = QTimer(self)
        timer.setInterval(interval_ms)
        timer.timeout.connect(_poll)
        timer.start()
        return _RecordingHandle(source, timer)

    def _ensure_microphone_permission(self) -> None:
        app = QCoreApplication.instance()
        if app is None:
            raise MicrophoneUnavailableError("Microphone access requires a running application.")
        permission = QMicrophonePermission()
        status = app.checkPermission(permission)
        if status == Qt.PermissionStatus.Granted:
            return
        if status == Qt.PermissionStatus.Undetermined:
            app.requestPermission(permission, self, lambda _result: None)
            raise MicrophoneUnavailableError("Microphone permission required. Allow access and try again.")
        raise MicrophoneUnavailableError("Microphone permission required.")
