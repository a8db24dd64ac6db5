from malt.repl import main

main()
