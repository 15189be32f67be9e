from src.student_attendance.student_attendance.main import create_app
from src.student_attendance.student_attendance.realtime.channel import socketio

app = create_app()


if __name__ == "__main__":
    socketio.run(app, host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])
