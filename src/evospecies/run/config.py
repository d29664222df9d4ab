import configparser
import os

class Config:

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:

            # Set defaults for speciation
            self.compatibility_threshold = 3.0
            self.distance_excess_coeff   = 1.0
            self.distance_disjoint_coeff = 1.0
            self.distance_params_coeff   = 0.4

            # Set defaults for stagnation
            self.max_stagnation_period = 15

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [SPECIATION]

        # Organisms whose genomic distance to a species representative is
        # not greater than this threshold are considered part of that species.
        self.compatibility_threshold = get_value('SPECIATION', 'compatibility_threshold', float)
        if self.compatibility_threshold is None:
            raise ValueError("'compatibility_threshold' in section [SPECIATION] must be a number, not None")

        # The coefficient for the excess gene counts'
        # contribution to the genomic distance.
        # Usually set equal to 'distance_disjoint_coeff'.
        self.distance_excess_coeff = get_value('SPECIATION', 'distance_excess_coeff', float, default=1.0)

        # The coefficient for the disjoint gene counts'
        # contribution to the genomic distance.
        # Usually set equal to 'distance_excess_coeff'.
        self.distance_disjoint_coeff = get_value('SPECIATION', 'distance_disjoint_coeff', float, default=1.0)

        # The coefficient for the average weight difference of
        # matching connection genes.
        self.distance_params_coeff = get_value('SPECIATION', 'distance_params_coeff', float, default=0.4)

        # [STAGNATION]

        # Species that have not shown improvement in more than this
        # number of generations are reported as stagnant.
        self.max_stagnation_period = get_value('STAGNATION', 'max_stagnation_period', int, default=15)
