from frontend_server.server import main

main()
