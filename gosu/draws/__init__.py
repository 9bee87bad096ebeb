"""Points, origins, drawer timing and box layout geometry."""