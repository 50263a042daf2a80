from scoreboard import create_app

app = create_app()

if __name__ == '__main__':
    port = app.config['PORT']
    app.logger.info(f"Server starting on port {port}")
    app.run(host='0.0.0.0', port=port, threaded=True)
