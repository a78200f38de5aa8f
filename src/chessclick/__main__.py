from chessclick.app import main

main()
