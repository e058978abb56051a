from tarjama.main import run

run()
