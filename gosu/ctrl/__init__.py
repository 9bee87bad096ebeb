"""Value handlers with key repeat, eased values and tick-based countdown settings."""