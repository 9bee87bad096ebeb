"""Reader for chart (.osu) files and their events, timing points and hit objects."""