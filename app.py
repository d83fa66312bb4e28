from src.memorize.app.entrypoint import main

main()
