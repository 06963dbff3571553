from src.bubble_vocab_trainer.app.entrypoint import main

main()
