"""Search profiles and difficulty-ladder results for the connectfour engine, as pandas tables and matplotlib charts."""
