"""Loading and saving data files as JSON or msgpack."""