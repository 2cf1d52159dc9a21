from dotenv import load_dotenv, find_dotenv
import os


class ConstantsManager:
    _dotenv_loaded = False

    def __init__(self):
        if not ConstantsManager._dotenv_loaded:
            load_dotenv(dotenv_path=find_dotenv(usecwd=True), override=False)
            ConstantsManager._dotenv_loaded = True

    def get_variable(self, variableName, default=None):
        variable = os.environ.get(variableName, "")
        if variable == "":
            if default is not None:
                return default
            raise Exception(f"Could not find {variableName} environment variable")
        return variable

    def get_max_bits_per_channel(self):
        value = int(self.get_variable('STEGO_MAX_BITS_PER_CHANNEL', "3"))
        if value < 1 or value > 8:
            raise ValueError(f"STEGO_MAX_BITS_PER_CHANNEL must be between 1 and 8, got {value}")
        return value

    def get_output_dir(self):
        return self.get_variable('STEGO_OUTPUT_DIR', "stego")
