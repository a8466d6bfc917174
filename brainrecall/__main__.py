from brainrecall.app import run

run()
