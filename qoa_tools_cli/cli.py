import configparser
import json
import logging

import fire
import soundfile as sf

from qoa import QoaError, QoaHeader, decode

SETTING_FILE = "settings.ini"


class Cli:
    """QOA Tools CLI

    Args:
        log_level (str, optional): Log level. Defaults to "INFO". {CRITICAL|FATAL|ERROR|WARN|WARNING|INFO|DEBUG|NOTSET}
    """

    @staticmethod
    def __config_logger(level: str) -> None:
        """Config logger

        Args:
            level (str): Log level
        """

        logging.basicConfig(
            level=level,
            format="[%(asctime)s] %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        )

    @staticmethod
    def __load_wav_subtype() -> str:
        """Loads WAV subtype from ini"""
        config = configparser.ConfigParser()
        config.read(SETTING_FILE)
        return config.get("QoaTools", "WavSubtype", fallback="PCM_16")

    def __init__(self, log_level="INFO"):
        """QOA Tools CLI

        Args:
            log_level (str, optional): Log level. Defaults to "INFO". {CRITICAL|FATAL|ERROR|WARN|WARNING|INFO|DEBUG|NOTSET}
        """

        Cli.__config_logger(log_level)
        self.__logger = logging.getLogger(__name__)

    def __decode(self, qoa_path: str):
        with open(qoa_path, "rb") as qoa_file:
            try:
                return decode(qoa_file)
            except QoaError as e:
                self.__logger.error(f"Failed to decode QOA. path={qoa_path} error={e}")
                raise

    def decode(self, qoa_path) -> None:
        """Decode a QOA and discard the samples

        Args:
            qoa_path (str): Input QOA path

        Raises:
            ValueError: Argument `qoa_path` must be str.
        """

        if not isinstance(qoa_path, str):
            raise ValueError("Argument `qoa_path` must be str.")

        audio = self.__decode(qoa_path)
        self.__logger.info(
            f"QOA decoded. samples={len(audio.samples)} channels={audio.channel_count} sample_rate={audio.sample_rate}"
        )

    def info(self, qoa_path) -> None:
        """Print information of a QOA

        Args:
            qoa_path (str): Input QOA path

        Raises:
            ValueError: Argument `qoa_path` must be str.
        """

        if not isinstance(qoa_path, str):
            raise ValueError("Argument `qoa_path` must be str.")

        with open(qoa_path, "rb") as qoa_file:
            header = QoaHeader.read(qoa_file)
        self.__logger.info(f"QOA header loaded. header={header}")
        audio = self.__decode(qoa_path)

        output_json = json.dumps(
            {
                "sample_count": header.sample_count,
                "frame_count": header.frame_count,
                "channel_count": audio.channel_count,
                "sample_rate": audio.sample_rate,
                "decoded_samples": len(audio.samples),
            },
            indent=2,
        )
        print(output_json)

    def qoa_to_wav(self, qoa_path, wav_path) -> None:
        """Convert a QOA to a WAV

        Args:
            qoa_path (str): Input QOA path
            wav_path (str): Output WAV path

        Raises:
            ValueError: Argument `qoa_path` must be str.
            ValueError: Argument `wav_path` must be str.
        """

        if not isinstance(qoa_path, str):
            raise ValueError("Argument `qoa_path` must be str.")
        if not isinstance(wav_path, str):
            raise ValueError("Argument `wav_path` must be str.")

        audio = self.__decode(qoa_path)
        samples = audio.to_numpy()
        subtype = Cli.__load_wav_subtype()
        self.__logger.info(f"Write WAV. path={wav_path} subtype={subtype}")
        sf.write(wav_path, samples, audio.sample_rate, subtype=subtype)


def main() -> None:
    fire.Fire(Cli)


if __name__ == "__main__":
    main()
