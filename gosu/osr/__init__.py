"""Reader for replay (.osr) files."""